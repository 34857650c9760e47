"""
Advisor — the one LLM call.
Receives reviews + precomputed statistics and writes a buy/don't-buy verdict.
The model only sees the review data we hand it; the numbers are ours.
"""
import logging
import os
import google.generativeai as genai
from dotenv import load_dotenv
from .models import ProductMetadata, Review
from .stats import (
    ReviewStats,
    format_rating_distribution,
    format_review_lines,
    format_sentiment_breakdown,
)

load_dotenv()
logger = logging.getLogger(__name__)

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

SYSTEM_PROMPT = """You are a shopping advisor. Provide a recommendation in this EXACT format with all 4 sections:

**BUY** or **DON'T BUY**

**Overall Rating**: X/10

**Why Buy/Don't Buy**: [The main reasons from the reviews - what makes it worth buying or what problems make it not worth it]

**Best For**: [Who this product is ideal for]

Only use the review data you are given. Do NOT use numbered lists; use only the section headers shown above."""

EXAMPLE_REQUEST = """Product: Example Product
Category: Electronics
Brand: Example Brand
Price: $100

REVIEW DATA:
Rating: 4/5 - Great product, works well (Source: Amazon)
Rating: 3/5 - Average quality, okay for the price (Source: Amazon)
Rating: 5/5 - Excellent value, highly recommend (Source: Reddit)

Statistics:
- Average Rating: 4.0/5
- Total Reviews: 3
- Rating Distribution: 3★: 1, 4★: 1, 5★: 1
- Sentiment: 2 positive, 1 neutral, 0 negative

Respond in the EXACT format specified above."""

EXAMPLE_RESPONSE = """**BUY**

**Overall Rating**: 7/10

**Why Buy/Don't Buy**: Reviewers praise the functionality and value. Ratings vary a little, but the overall sentiment is favorable and buyers find it worth the price.

**Best For**: Shoppers looking for good-value electronics with reliable performance."""

genai.configure(api_key=os.getenv("GEMINI_API_KEY"))
_model = genai.GenerativeModel(
    GEMINI_MODEL,
    system_instruction=SYSTEM_PROMPT,
    generation_config={"temperature": 0.3, "max_output_tokens": 1024},
)


class UpstreamAnalysisFailure(Exception):
    """The LLM call failed or came back empty."""


def build_prompt(product_name: str, metadata: ProductMetadata,
                 reviews: list[Review], stats: ReviewStats) -> str:
    return f"""Product: {product_name}
Category: {metadata.category}
Brand: {metadata.brand}
Price: {metadata.price}

REVIEW DATA (ONLY use this data for your analysis):
{format_review_lines(reviews)}

Statistics:
- Average Rating: {stats.average_display}/5
- Total Reviews: {stats.total_reviews}
- Rating Distribution: {format_rating_distribution(stats.rating_distribution)}
- Sentiment: {format_sentiment_breakdown(stats.sentiment_breakdown)}

Respond in the EXACT format specified above. Make sure to include the "Why Buy/Don't Buy" reasoning section."""


async def recommend(product_name: str, metadata: ProductMetadata,
                    reviews: list[Review], stats: ReviewStats) -> str:
    contents = [
        {"role": "user", "parts": [EXAMPLE_REQUEST]},
        {"role": "model", "parts": [EXAMPLE_RESPONSE]},
        {"role": "user", "parts": [build_prompt(product_name, metadata, reviews, stats)]},
    ]

    try:
        resp = await _model.generate_content_async(contents)
        text = resp.text
    except Exception as e:
        logger.error(f"[Advisor] Gemini call failed for {product_name}: {e}")
        raise UpstreamAnalysisFailure(str(e)) from e

    if not text or not text.strip():
        raise UpstreamAnalysisFailure("empty response")
    return text.strip()
