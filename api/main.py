import json
import logging
import os
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from algorithms.boyer_moore import iter_steps, replay, search
from services.protocol_log import protocol_log, protocol_stats
from services.shares import ShareAnnotator
from utils.dna import InvalidInput, validate_inputs

logging.basicConfig(level=os.getenv("DNA_SEARCH_LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

app = FastAPI(title="DNA Boyer-Moore Search API", version="1.0")

# CORS for demos; restrict origins in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class SearchRequest(BaseModel):
    text: str
    pattern: str
    annotate: bool = False
    seed: Optional[int] = None


class SearchResponse(BaseModel):
    result: Dict[str, Any]
    trace: List[Dict[str, Any]]
    log: List[Dict[str, Any]]
    stats: Dict[str, Any]


def _bad_request(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid input parameters", "error": reason},
    )


def _checked(req: SearchRequest):
    text, pattern = validate_inputs(req.text, req.pattern)
    max_text = int(os.getenv("DNA_SEARCH_MAX_TEXT", "5000"))
    if len(text) > max_text:
        raise InvalidInput(f"Text is limited to {max_text} bases", field="text")
    return text, pattern


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/api/search", response_model=SearchResponse)
def search_endpoint(req: SearchRequest):
    try:
        text, pattern = _checked(req)
    except InvalidInput as e:
        logger.info("rejected search: %s", e)
        return _bad_request(str(e))
    try:
        result, trace = search(text, pattern)
        annotator = ShareAnnotator(req.seed) if req.annotate else None
        return SearchResponse(
            result=result.to_dict(),
            trace=trace.to_list(),
            log=protocol_log(trace, pattern, annotator),
            stats=protocol_stats(trace, len(text)),
        )
    except Exception:
        logger.exception("search failed for pattern %r", pattern)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error during search",
                     "error": "Failed to execute search"},
        )


@app.post("/api/search/stream")
def search_stream(req: SearchRequest, delay: float = Query(0.0, ge=0.0)):
    max_delay = float(os.getenv("DNA_SEARCH_MAX_DELAY", "5.0"))
    if delay > max_delay:
        return _bad_request(f"delay cannot exceed {max_delay} seconds")
    try:
        text, pattern = _checked(req)
        steps = iter_steps(text, pattern)
    except InvalidInput as e:
        logger.info("rejected stream: %s", e)
        return _bad_request(str(e))

    def lines():
        for step in replay(steps, delay):
            yield json.dumps(step.to_dict()) + "\n"

    return StreamingResponse(lines(), media_type="application/x-ndjson")

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
