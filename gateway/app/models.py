from pydantic import BaseModel, Field
from typing import Literal, Optional
import datetime

SentimentLabel = Literal["positive", "neutral", "negative"]


class Review(BaseModel):
    text: str
    rating: int = Field(ge=1, le=5)
    sentiment: SentimentLabel = "neutral"
    source: str
    date: Optional[datetime.date] = None


class ProductMetadata(BaseModel):
    category: str = "General"
    brand: str = "Various"
    price: str = "Varies"
    release_date: Optional[str] = None


class CatalogEntry(BaseModel):
    reviews: list[Review]
    metadata: ProductMetadata


class AnalyzeRequest(BaseModel):
    product_name: str = ""
    use_real_data: bool = False


class AnalyzeResponse(BaseModel):
    product: str
    found: bool
    message: Optional[str] = None
    # Populated only when found
    average_rating: Optional[str] = None
    total_reviews: Optional[int] = None
    sentiment_breakdown: Optional[dict[str, int]] = None
    rating_distribution: Optional[dict[int, int]] = None
    metadata: Optional[ProductMetadata] = None
    recommendation: Optional[str] = None
    data_source: Optional[str] = None
    mcp_enabled: Optional[bool] = None


class ProductsResponse(BaseModel):
    products: list[str]


class ScrapeTestRequest(BaseModel):
    product_name: str


class ScrapeTestResponse(BaseModel):
    product: str
    review_count: int
    sources: list[str]
    sample_reviews: list[Review]
