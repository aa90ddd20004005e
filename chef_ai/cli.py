# cli.py
import os, sys, json, argparse
from dotenv import load_dotenv


def main(argv=None):
    ap = argparse.ArgumentParser("chef-ai", description="Photo of ingredients -> 3 Chinese recipes")
    ap.add_argument("image", help="path to image")
    ap.add_argument("--env", type=str, default=None, help=".env file to load before reading the API key")
    ap.add_argument("--model", type=str, default=None)
    ap.add_argument("--json", action="store_true", help="print the session snapshot as JSON")
    args = ap.parse_args(argv)

    if args.env: load_dotenv(args.env, override=True)
    else: load_dotenv()

    # --env may name a different file than the one settings loaded at import
    from .config.settings import Config, _read_api_key
    from .services.analysis_service import AnalysisService
    from .services.session.analysis_session import AnalysisSession
    from .models.analysis import AppState
    from .utils.helpers import bytes_to_data_url

    try:
        with open(args.image, "rb") as f:
            data_url = bytes_to_data_url(f.read())
    except OSError as e:
        print(f"[ERROR] cannot read {args.image}: {e}", file=sys.stderr)
        return 1
    except ValueError:
        print(f"[ERROR] {args.image} is not a readable image", file=sys.stderr)
        return 1

    session = AnalysisSession("cli")
    session.load_image(data_url)
    service = AnalysisService(_read_api_key() or Config.GEMINI_API_KEY, args.model or os.getenv("CHEF_AI_MODEL") or Config.DEFAULT_MODEL)
    state = service.analyze(session)
    snap = session.snapshot(include_image=False)

    if args.json:
        print(json.dumps(snap.model_dump(mode="json"), ensure_ascii=False, indent=2))
        return 0 if state is AppState.SUCCESS else 1

    if state is not AppState.SUCCESS:
        print("\n[ERROR]", snap.error)
        return 1

    res = snap.result
    print("\n==== DETECTED INGREDIENTS ====")
    print(", ".join(res.ingredients) or "(none)")

    for r in res.recipes:
        print(f"\nRecipe {r.id}: {r.name}  [{r.style}]")
        print(f"  {r.instructions or '(no instructions)'}")

    if res.sources:
        print("\n==== VERIFIED REFERENCES ====")
        for s in res.sources:
            print(f"  - {s.title}: {s.uri}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
