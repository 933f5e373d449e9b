"""Instruction template and response schema for the article analysis call."""

from google.genai import types

ANALYSIS_TEMPLATE = """Analyze the following blog post content. Based on its core message, keywords, and emotional tone (e.g., formal, technical, casual, inspirational, futuristic), generate two things:

1. A detailed, evocative prompt for an image generation AI to create a {aspect_ratio} header image. The prompt should describe a visually appealing scene, abstract concept, or stylized typography. It should specify the style (e.g., 'minimalist vector art', 'photorealistic', 'abstract gradient background'), color palette (e.g., 'dark mode with neon blue accents'), and overall mood. If the article has a clear title, incorporate it as stylized text within the image description. Any text included in the image must be in English.

2. An array of exactly {tag_count} relevant tags for the blog post, optimized for SEO.

Blog Post Content:
---
{article_text}
---"""

TAG_COUNT = 5
IMAGE_ASPECT_RATIO = "16:9"

ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "imagePrompt": types.Schema(
            type=types.Type.STRING,
            description="A detailed prompt for the image generation model.",
        ),
        "tags": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            min_items=TAG_COUNT,
            max_items=TAG_COUNT,
            description=f"An array of exactly {TAG_COUNT} SEO-optimized tags.",
        ),
    },
    required=["imagePrompt", "tags"],
)


def build_analysis_prompt(article_text: str) -> str:
    """Embed the raw article text into the analysis instruction.

    Args:
        article_text: Article as pasted by the user (not trimmed)

    Returns:
        Full instruction sent to the text model
    """
    return ANALYSIS_TEMPLATE.format(
        aspect_ratio=IMAGE_ASPECT_RATIO,
        tag_count=TAG_COUNT,
        article_text=article_text,
    )
