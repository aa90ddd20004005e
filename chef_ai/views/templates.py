# templates.py
"""
Inline Jinja templates for the single page.
"""

RECIPE_CARD_HTML = """
<article class="card recipe" data-recipe-id="{{ recipe.id }}">
  <div class="card-top"></div>
  <div class="card-body">
    <header class="recipe-head">
      <h3>{{ recipe.name }}</h3>
      <span class="badge">{{ recipe.style }}</span>
    </header>
    <p class="label">Method</p>
    <p class="instructions">{{ recipe.instructions }}</p>
  </div>
</article>
"""

INDEX_HTML = """<!doctype html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Chef AI</title>
    <style>
      body { font-family: system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif; margin: 0; background: #f8fafc; color: #0f172a }
      nav { background: #fff; border-bottom: 1px solid #eee; padding: 12px 24px; display: flex; justify-content: space-between }
      nav b { color: #dc2626 }
      main { max-width: 1040px; margin: 24px auto; padding: 0 16px; display: grid; grid-template-columns: 5fr 7fr; gap: 24px }
      .card { background: #fff; border: 1px solid #f1f5f9; border-radius: 16px; padding: 16px; margin-bottom: 16px }
      .card.recipe { padding: 0; overflow: hidden }
      .card-top { height: 4px; background: #dc2626 }
      .card-body { padding: 16px }
      .recipe-head { display: flex; justify-content: space-between; align-items: start; gap: 8px }
      .badge { background: #ffedd5; color: #c2410c; font-size: 12px; font-weight: 600; padding: 4px 10px; border-radius: 999px; text-transform: uppercase }
      .label { font-size: 12px; color: #64748b; text-transform: uppercase; font-weight: 600 }
      .chip { display: inline-block; padding: 6px 14px; margin: 3px; border: 1px solid #f1f5f9; border-radius: 999px; background: #f8fafc }
      .error { background: #fef2f2; border: 1px solid #fecaca; color: #b91c1c; border-radius: 12px; padding: 12px }
      .panel { text-align: center; padding: 48px 16px; border: 2px dashed #e2e8f0; border-radius: 16px; color: #94a3b8 }
      .sources { background: #0f172a; color: #cbd5e1 }
      .sources a { color: #e2e8f0; display: block; padding: 6px 0 }
      img.preview { width: 100%; aspect-ratio: 4/3; object-fit: cover; border-radius: 12px }
      button.primary { width: 100%; padding: 14px; background: #dc2626; color: #fff; border: 0; border-radius: 12px; font-weight: 700 }
      button.primary:disabled { background: #cbd5e1 }
      h4 { font-size: 12px; color: #94a3b8; text-transform: uppercase; letter-spacing: .1em }
    </style>
  </head>
  <body>
    <nav><span><b>Chef AI</b></span><span>Chinese Cuisine Generator</span></nav>
    <main>
      <section>
        <div class="card">
          <h2>Input Photo</h2>
          {% if not snap.has_image %}
          <form method="POST" action="{{ url_for('analysis.upload', ui=1) }}" enctype="multipart/form-data">
            <input type="hidden" name="ui" value="1">
            <div><input type="file" name="image" accept="image/*" required></div>
            <p style="color:#94a3b8;font-size:12px">JPG, PNG, GIF or WEBP up to 10MB</p>
            <div><button class="primary" type="submit">Upload photo</button></div>
          </form>
          {% else %}
          <img class="preview" src="{{ snap.image }}" alt="Selected ingredients">
          <form method="POST" action="{{ url_for('analysis.reset', ui=1) }}" style="margin:8px 0">
            <input type="hidden" name="ui" value="1">
            <button type="submit">Clear</button>
          </form>
          <form method="POST" action="{{ url_for('analysis.analyze', ui=1) }}" onsubmit="this.querySelector('button').disabled=true;this.querySelector('button').textContent='Analyzing...';">
            <input type="hidden" name="ui" value="1">
            <button class="primary" type="submit" {% if snap.state.value == 'LOADING' %}disabled{% endif %}>
              {% if snap.state.value == 'LOADING' %}Analyzing...{% else %}Analyze &amp; Generate Recipes{% endif %}
            </button>
          </form>
          {% endif %}
        </div>
        {% for msg in get_flashed_messages(category_filter=['error']) %}
        <div class="error" role="alert">{{ msg }}</div>
        {% endfor %}
        {% if snap.error %}
        <div class="error" role="alert">{{ snap.error }}</div>
        {% endif %}
      </section>

      <section>
        {% if snap.state.value == 'LOADING' %}
        <div class="panel">
          <h3>Identifying Ingredients...</h3>
          <p>Our Chef AI is consulting traditional culinary libraries to find the perfect dishes for you.</p>
        </div>
        {% elif snap.state.value == 'IDLE' and not snap.has_image %}
        <div class="panel">
          <h3>No Analysis Yet</h3>
          <p>Upload a photo of your vegetables, meats, or seasonings to see recipe suggestions.</p>
        </div>
        {% elif snap.state.value == 'SUCCESS' and snap.result %}
        <div class="card">
          <h4>Detected Ingredients</h4>
          {% for ing in snap.result.ingredients %}<span class="chip">{{ ing }}</span>{% endfor %}
        </div>
        <h4>Recommended Dishes</h4>
        {{ recipe_cards }}
        {% if snap.result.sources %}
        <div class="card sources">
          <h4>Verified References</h4>
          {% for src in snap.result.sources %}
          <a href="{{ src.uri }}" target="_blank" rel="noopener noreferrer">{{ src.title }}</a>
          {% endfor %}
        </div>
        {% endif %}
        {% endif %}
      </section>
    </main>
    <footer style="text-align:center;color:#94a3b8;font-size:13px;padding:32px">Powered by Gemini and Google Search Grounding</footer>
  </body>
</html>"""
