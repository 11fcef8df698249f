# --- Notation Tracer API (FastAPI) --------------------------------------------
# Purpose: Thin HTTP surface over the conversion core. Converts an expression
# between infix/prefix/postfix and returns the result plus its step trace, or
# the same trace rendered as a markdown table.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
import logging
from typing import Any, Dict, List, Optional
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field
from nconv.dispatcher import convert, supported_conversions, UnsupportedConversionError
from nconv.formatters import steps_to_markdown
from nconv.tokenizer import ConversionError, InvalidCharacterError
from nconv.types import Notation

# Load .env for external configuration (log level, API title)
load_dotenv()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
API_TITLE = os.getenv("API_TITLE", "Notation Tracer API")

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _classify_error(e: Exception) -> str:
    """
    Map conversion exceptions to a coarse error_kind for the API:
      - 'invalid_character': tokenizer rejected a character
      - 'unsupported_conversion': notation pair outside the registry
    """
    if isinstance(e, InvalidCharacterError):
        return "invalid_character"
    if isinstance(e, UnsupportedConversionError):
        return "unsupported_conversion"
    return "conversion"

app = FastAPI(title=API_TITLE)

# ----------------------------- Schemas ----------------------------------------
class ConvertRequest(BaseModel):
    source: Notation
    target: Notation
    # Trimmed before conversion, as the input field would do
    expression: str = Field(default="")

class StepOut(BaseModel):
    sequence_index: int
    remaining_input: str
    stack_snapshot: str
    output_so_far: str
    action: str

class ConvertResponse(BaseModel):
    ok: bool
    source: Notation
    target: Notation
    expression: str
    result: Optional[str] = None
    steps: List[StepOut] = Field(default_factory=list)
    error: Optional[str] = None
    error_kind: Optional[str] = None

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/notations")
def list_notations() -> Dict[str, Any]:
    """Notations accepted by /convert and the directed pairs that have an algorithm."""
    return {
        "notations": [n.value for n in Notation],
        "conversions": [{"source": s.value, "target": t.value} for s, t in supported_conversions()],
    }

@app.post("/convert", response_model=ConvertResponse)
def convert_expression(req: ConvertRequest):
    """
    Core path:
    1) Trim the expression and dispatch on (source, target).
    2) On success return result + full step trace.
    3) Conversion errors come back as ok=False with error/error_kind.
    """
    expr = req.expression.strip()
    try:
        res = convert(req.source, req.target, expr)
    except ConversionError as e:
        kind = _classify_error(e)
        logger.info("convert %s -> %s failed (%s): %s", req.source.value, req.target.value, kind, e)
        return ConvertResponse(ok=False, source=req.source, target=req.target, expression=expr,
                               error=str(e), error_kind=kind)
    logger.info("convert %s -> %s: %d step(s)", req.source.value, req.target.value, len(res.steps))
    return ConvertResponse(
        ok=True,
        source=req.source,
        target=req.target,
        expression=expr,
        result=res.result,
        steps=[StepOut(**s.to_dict()) for s in res.steps],
    )

@app.post("/convert/markdown", response_class=PlainTextResponse)
def convert_markdown(req: ConvertRequest):
    """Same conversion, rendered as a markdown table for pasting into notes."""
    try:
        res = convert(req.source, req.target, req.expression.strip())
    except ConversionError as e:
        # 400: the expression or pair itself is at fault
        raise HTTPException(status_code=400, detail={"error": str(e), "error_kind": _classify_error(e)})
    return PlainTextResponse(steps_to_markdown(res.steps), media_type="text/markdown")
