from .gemini_client import make_client, decode_data_url, encode_data_url, image_part_from_data_url, extract_text_from_response, extract_grounding_sources

__all__ = ["make_client", "decode_data_url", "encode_data_url", "image_part_from_data_url", "extract_text_from_response", "extract_grounding_sources"]
