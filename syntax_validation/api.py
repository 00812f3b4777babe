from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from typing import Any, Dict
import time

from syntax_validation import ReportGenerator, get_metrics, get_style_validator
from syntax_validation.config import load_settings

app = FastAPI(title="Syntax Style Validator")

_settings = load_settings()


class ValidateRequest(BaseModel):
    style: Dict[str, Any]


@app.post("/validate")
async def validate(req: ValidateRequest):
    try:
        start_time = time.time()
        errors = get_style_validator().validate_syntax(req.style)
        if _settings.metrics_enabled:
            get_metrics().record_validation(errors, time.time() - start_time)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "valid": not errors,
        "message": ReportGenerator.generate_text_report(errors),
        "errors": [e.to_dict() for e in errors],
    }


@app.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    return get_metrics().export_text()


@app.get("/health")
async def health():
    return {"status": "ok"}
