import logging
import os
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from .aggregator import build_default_aggregator
from .models import ScrapeRequest, ScrapeResponse

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.aggregator = build_default_aggregator()
    yield
    logger.info("[Scraper] Shutting down, closing browser...")
    await app.state.aggregator.close()


app = FastAPI(title="Scraper Service", lifespan=lifespan)


@app.post("/scrape", response_model=ScrapeResponse)
async def scrape(req: ScrapeRequest, request: Request):
    logger.info(f"[Scraper] Starting sources for: {req.product_name}")
    reviews = await request.app.state.aggregator.fetch_reviews(req.product_name)

    sources = list(dict.fromkeys(r.source for r in reviews))
    return ScrapeResponse(
        product_name=req.product_name,
        reviews=reviews,
        total_count=len(reviews),
        sources=sources,
    )


@app.get("/health")
def health():
    return {"status": "ok"}
