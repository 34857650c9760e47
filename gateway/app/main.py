import logging
import os
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import httpx
from .catalog import product_names
from .models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ProductsResponse,
    ScrapeTestRequest,
    ScrapeTestResponse,
)
from . import pipeline

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173"


@asynccontextmanager
async def lifespan(app: FastAPI):
    names = product_names()
    logger.info(f"[Gateway] Loaded {len(names)} products with static data")
    yield


app = FastAPI(title="Shopping Advisor Gateway", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", DEFAULT_ORIGINS).split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/api/analyze", response_model=AnalyzeResponse, response_model_exclude_none=True)
async def analyze(req: AnalyzeRequest):
    product_name = req.product_name.strip()
    if not product_name:
        raise HTTPException(status_code=400, detail="Product name is required")

    logger.info(f"[Gateway] Analyzing product: {product_name} (real data: {req.use_real_data})")
    return await pipeline.analyze_product(product_name, req.use_real_data)


@app.get("/api/products", response_model=ProductsResponse)
async def list_products():
    return ProductsResponse(products=product_names())


@app.post("/api/test-scraping", response_model=ScrapeTestResponse)
async def test_scraping(req: ScrapeTestRequest):
    logger.info(f"[Gateway] Testing scraping for: {req.product_name}")
    try:
        reviews = await pipeline.fetch_live_reviews(req.product_name)
    except httpx.HTTPError as e:
        logger.error(f"[Gateway] Scraping test error: {e}")
        raise HTTPException(status_code=500, detail="Scraping test failed")

    return ScrapeTestResponse(
        product=req.product_name,
        review_count=len(reviews),
        sources=list(dict.fromkeys(r.source for r in reviews)),
        sample_reviews=reviews[:3],
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
