import datetime
from enum import Enum
from pydantic import BaseModel, Field


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Review(BaseModel):
    text: str
    rating: int = Field(ge=1, le=5)
    sentiment: Sentiment = Sentiment.NEUTRAL
    source: str          # "Reddit" | "Trustpilot" | "Product Hunt" | "Mock Data"
    date: datetime.date


class ScrapeRequest(BaseModel):
    product_name: str = Field(min_length=1)


class ScrapeResponse(BaseModel):
    product_name: str
    reviews: list[Review]
    total_count: int
    sources: list[str]
