# uadetect/api.py

import logging

from fastapi import APIRouter, Request

from uadetect.client_hints import HeaderClientHints
from uadetect.detector import classify_request, create_detector
from uadetect.schemas import ClientHintsResult, DetectorResult, DetectRequest, DetectResponse
from uadetect.sources import HeaderSource

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/detect", response_model=DetectorResult)
async def detect_from_headers(request: Request) -> DetectorResult:
    """
    Classify the calling client from its own request headers.
    Capabilities need a client-side probe, so they read as absent here.
    """
    detector = create_detector(HeaderSource.from_headers(request.headers))
    return detector.detect_all()


@router.post("/api/detect", response_model=DetectResponse)
async def detect_batch(request: Request) -> DetectResponse:
    """
    Classify reported identification strings.
    Accepts a single request object or an array of them.
    """
    body = await request.json()

    # Normalize to list
    if isinstance(body, dict):
        items = [body]
    elif isinstance(body, list):
        items = body
    else:
        return DetectResponse(status="error", processed=0, errors=1)

    results = []
    errors = 0

    for item in items:
        try:
            detect_request = DetectRequest.model_validate(item)
            results.append(classify_request(detect_request))
        except Exception as e:
            errors += 1
            logger.warning(f"Failed to classify item: {e}")

    return DetectResponse(
        status="ok" if errors == 0 else "partial",
        processed=len(results),
        errors=errors,
        results=results,
    )


@router.get("/api/client-hints", response_model=ClientHintsResult)
async def client_hints(request: Request) -> ClientHintsResult:
    """Client hints from the Sec-CH-UA* headers, high entropy when granted"""
    detector = create_detector(client_hints=HeaderClientHints.from_headers(request.headers))
    return await detector.detect_client_hints()


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
