"""FastAPI transport for the conversion job contract.

Requires the ``http`` extra (``pip install keycase[http]``).

Endpoints:
- ``GET  /health``  -> ``{"status": "ok"}``
- ``POST /convert`` -> request envelope in, response envelope out

Failed jobs are response data: ``/convert`` answers 200 with
``{"type": "error", "error": ...}``.  Only a body that does not match the
request model is rejected with FastAPI's usual 422.

Run with::

    uvicorn --factory keycase.integrations._http:create_app
"""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Literal

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict, Field

from keycase.worker import ConversionWorker

__all__ = ["ConvertRequest", "ConvertResponse", "OptionsModel", "create_app"]


class OptionsModel(BaseModel):
    """Wire form of ConversionOptions; omitted fields take library defaults."""

    model_config = ConfigDict(populate_by_name=True)

    mode: str | None = "snake-to-camel"
    case_style: str | None = Field(default=None, alias="caseStyle")
    preserve_acronyms: bool | None = Field(default=None, alias="preserveAcronyms")
    safe_chars_only: bool | None = Field(default=None, alias="safeCharsOnly")
    trim_whitespace: bool | None = Field(default=None, alias="trimWhitespace")
    exclude_paths: list[str] | None = Field(default=None, alias="excludePaths")
    convert_keys_only: bool | None = Field(default=None, alias="convertKeysOnly")
    pretty_print: bool | None = Field(default=None, alias="prettyPrint")


class ConvertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    input_type: str = Field(default="text", alias="inputType")
    options: OptionsModel = Field(default_factory=OptionsModel)

    def to_envelope(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "inputType": self.input_type,
            "options": self.options.model_dump(by_alias=True, exclude_none=False),
        }


class ConvertResponse(BaseModel):
    type: Literal["success", "error"]
    result: str | None = None
    error: str | None = None


def create_app(worker: ConversionWorker | None = None) -> FastAPI:
    """Build the HTTP app around ``worker``.

    Args:
        worker: Worker that runs the jobs.  A private one is created when
            omitted and closed on application shutdown.
    """
    owned = worker is None
    job_worker = worker if worker is not None else ConversionWorker()

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        if owned:
            job_worker.close()

    app = FastAPI(title=os.getenv("KEYCASE_APP_NAME", "keycase"), lifespan=lifespan)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/convert", response_model=ConvertResponse, response_model_exclude_none=True)
    async def convert(request: ConvertRequest) -> ConvertResponse:
        result = await job_worker.run(request.to_envelope())
        return ConvertResponse(**result.to_dict())

    return app
