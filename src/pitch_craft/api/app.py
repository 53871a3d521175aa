import logging

from fastapi import FastAPI

from pitch_craft.api.schemas import ClassifyResponse, GenerateRequest, GenerateResponse
from pitch_craft.config import get_settings
from pitch_craft.pipeline.industry import detect_industry
from pitch_craft.service.generator import GenerateService

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="pitch-craft", version="0.1.0")
service = GenerateService(settings=settings)


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    result = await service.generate(req.to_startup_data())
    return GenerateResponse(**result)


@app.post("/classify", response_model=ClassifyResponse)
async def classify(req: GenerateRequest) -> ClassifyResponse:
    industry = detect_industry(req.to_startup_data())
    return ClassifyResponse(industry=industry)
