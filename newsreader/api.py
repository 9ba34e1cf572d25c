from fastapi import FastAPI, Body, Depends, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from datetime import datetime, timezone
from typing import Optional
import logging

from .cache import LookupCache
from .config import CORS_ORIGINS, LOG_LEVEL, MAX_TEXT_LENGTH
from .errors import ExtractionError, FetchError, LookupFailedError
from .extractor import fetch_html
from .lookup import LookupGateway
from .rate_limit import RATE_LIMITS, RateLimiter
from .schemas import (
    ErrorResponse, HealthResponse, ParsedArticle,
    TranslateRequest, TranslateResponse, WordMeaning, WordRequest,
)
from .store import MemoryStore
from .structurer import ArticleStructurer
from .validation import is_valid_url, validate_sentence, validate_text_length, validate_word

log = logging.getLogger("uvicorn.error")
log.setLevel(LOG_LEVEL)

app = FastAPI(title="News Reader API", version="1.0.0")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS, allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"], allow_headers=["Content-Type"],
)

# user-facing messages
MSG_INVALID_URL = "正しいURLを入力してください"
MSG_INVALID_INPUT = "入力が無効です"
MSG_RATE_LIMITED = "利用上限に達しました。しばらくお待ちください"
MSG_ARTICLE_FAILED = "記事を取得できませんでした"
MSG_ARTICLE_TIMEOUT = "記事の取得がタイムアウトしました"
MSG_LOOKUP_FAILED = "翻訳を取得できませんでした。再度タップしてください"

ERRORS = {
    400: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
}

@app.exception_handler(StarletteHTTPException)
async def http_error(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail},
                        headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": MSG_INVALID_INPUT})

# -------- Shared state ----------
_store = MemoryStore()
_cache = LookupCache()
_structurer = ArticleStructurer()
_gateway: Optional[LookupGateway] = None

def get_store() -> MemoryStore:
    return _store

def get_cache() -> LookupCache:
    return _cache

def get_structurer() -> ArticleStructurer:
    return _structurer

def get_gateway() -> LookupGateway:
    global _gateway
    if _gateway is None:
        _gateway = LookupGateway()
    return _gateway

def client_ip(request: Request) -> str:
    ip = request.headers.get("CF-Connecting-IP")
    if ip:
        return ip.strip()
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"

def _limiter(store, ip: str, kind: str) -> RateLimiter:
    limiter = RateLimiter(store, RATE_LIMITS[kind])
    if not limiter.check_limit(ip, kind).allowed:
        log.info(f"rate limit reached: {kind} {ip}")
        raise HTTPException(status_code=429, detail=MSG_RATE_LIMITED)
    return limiter

# -------------------- Endpoints --------------------

@app.get("/healthz", response_model=HealthResponse)
def healthz():
    return {"ok": True, "time": datetime.now(timezone.utc).isoformat()}

@app.get("/api/article", response_model=ParsedArticle, tags=["article"],
         summary="Fetch an article and split it into paragraphs, sentences and words",
         responses={**ERRORS, 502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}})
async def article(
    request: Request,
    url: Optional[str] = Query(None, description="Article URL"),
    store=Depends(get_store),
    structurer: ArticleStructurer = Depends(get_structurer),
):
    if not url or not is_valid_url(url):
        raise HTTPException(status_code=400, detail=MSG_INVALID_URL)

    ip = client_ip(request)
    limiter = _limiter(store, ip, "article")

    try:
        html = await fetch_html(url)
        parsed = await run_in_threadpool(structurer.structure, html, url)
    except FetchError as e:
        log.warning(f"article fetch failed: {e.message}")
        if e.timed_out:
            raise HTTPException(status_code=504, detail=MSG_ARTICLE_TIMEOUT)
        raise HTTPException(status_code=502, detail=MSG_ARTICLE_FAILED)
    except ExtractionError as e:
        log.warning(f"article extraction failed for {url}: {e.message}")
        raise HTTPException(status_code=502, detail=MSG_ARTICLE_FAILED)

    limiter.increment(ip, "article")
    return parsed

@app.post("/api/word", response_model=WordMeaning, tags=["lookup"],
          responses={**ERRORS, 503: {"model": ErrorResponse}})
def word(
    request: Request,
    payload: WordRequest = Body(...),
    store=Depends(get_store),
    cache: LookupCache = Depends(get_cache),
    gateway: LookupGateway = Depends(get_gateway),
):
    if not validate_word(payload.word) or not validate_sentence(payload.context):
        raise HTTPException(status_code=400, detail=MSG_INVALID_INPUT)
    if not (validate_text_length(payload.word, MAX_TEXT_LENGTH)
            and validate_text_length(payload.context, MAX_TEXT_LENGTH)):
        raise HTTPException(status_code=400, detail=MSG_INVALID_INPUT)

    cached = cache.get_word_meaning(payload.word, payload.context)
    if cached is not None:
        return cached

    ip = client_ip(request)
    limiter = _limiter(store, ip, "word")
    try:
        meaning = gateway.get_word_meaning(payload.word, payload.context)
    except LookupFailedError as e:
        log.warning(f"word lookup failed for {payload.word!r}: {e.message}")
        raise HTTPException(status_code=503, detail=MSG_LOOKUP_FAILED)

    limiter.increment(ip, "word")
    cache.set_word_meaning(payload.word, payload.context, meaning)
    return meaning

@app.post("/api/translate", response_model=TranslateResponse, tags=["lookup"],
          responses={**ERRORS, 503: {"model": ErrorResponse}})
def translate(
    request: Request,
    payload: TranslateRequest = Body(...),
    store=Depends(get_store),
    cache: LookupCache = Depends(get_cache),
    gateway: LookupGateway = Depends(get_gateway),
):
    if not validate_sentence(payload.sentence) or not validate_text_length(payload.sentence, MAX_TEXT_LENGTH):
        raise HTTPException(status_code=400, detail=MSG_INVALID_INPUT)

    cached = cache.get_translation(payload.sentence)
    if cached is not None:
        return TranslateResponse(translation=cached)

    ip = client_ip(request)
    limiter = _limiter(store, ip, "translate")
    try:
        translation = gateway.translate_sentence(payload.sentence)
    except LookupFailedError as e:
        log.warning(f"translation failed: {e.message}")
        raise HTTPException(status_code=503, detail=MSG_LOOKUP_FAILED)

    limiter.increment(ip, "translate")
    cache.set_translation(payload.sentence, translation)
    return TranslateResponse(translation=translation)
