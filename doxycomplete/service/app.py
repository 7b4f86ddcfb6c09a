"""FastAPI application exposing the comment engine to editor hosts."""

from __future__ import annotations

from datetime import date
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..descriptors import DescriptorError, descriptor_from_mapping
from ..engine import CommentEngine
from ..rendering.file_header import FileContext


class ParameterModel(BaseModel):
    name: str
    type: str = ""
    direction: Optional[str] = None


class DeclarationModel(BaseModel):
    kind: str
    name: str
    full_name: str = ""
    function_kind: str = "ordinary"
    parameters: List[ParameterModel] = []
    return_type: str = "void"
    parent_class: Optional[str] = None


class CommentRequest(BaseModel):
    declaration: Optional[DeclarationModel] = None
    existing: str = ""
    indent: str = ""


class CommentResponse(BaseModel):
    text: str
    single_line: bool


class FileCommentRequest(BaseModel):
    filename: str
    project_name: str = ""
    author: str = ""
    today: Optional[date] = None


class FileCommentResponse(BaseModel):
    text: str
    cursor_line: int


class IndentationRequest(BaseModel):
    previous_line: str
    column: int


class IndentationResponse(BaseModel):
    success: bool
    column: int


class HealthResponse(BaseModel):
    status: str


def create_app(
    engine_factory: Callable[[], CommentEngine] = CommentEngine,
) -> FastAPI:
    """Create the FastAPI application exposing doxycomplete operations."""

    app = FastAPI(title="doxycomplete", version="1.0.0")

    async def get_engine() -> CommentEngine:
        return engine_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/comment", response_model=CommentResponse)
    async def comment(
        payload: CommentRequest,
        engine: CommentEngine = Depends(get_engine),
    ) -> CommentResponse:
        declaration = None
        if payload.declaration is not None:
            declaration = descriptor_from_mapping(payload.declaration.model_dump())
        text = engine.generate_comment(declaration, payload.existing, indent=payload.indent)
        return CommentResponse(text=text, single_line=engine.uses_single_line(declaration))

    @app.post("/file-comment", response_model=FileCommentResponse)
    async def file_comment(
        payload: FileCommentRequest,
        engine: CommentEngine = Depends(get_engine),
    ) -> FileCommentResponse:
        context = FileContext(
            filename=payload.filename,
            project_name=payload.project_name,
            author=payload.author,
            today=payload.today or date.today(),
        )
        result = engine.generate_file_comment(context)
        return FileCommentResponse(text=result.text, cursor_line=result.cursor_line)

    @app.post("/indentation", response_model=IndentationResponse)
    async def indentation(
        payload: IndentationRequest,
        engine: CommentEngine = Depends(get_engine),
    ) -> IndentationResponse:
        result = engine.indentation(payload.previous_line, payload.column)
        return IndentationResponse(success=result.success, column=result.column)

    @app.exception_handler(DescriptorError)
    async def descriptor_error_handler(
        _: Any, exc: DescriptorError
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1",
    port: int = 8000,
    engine_factory: Callable[[], CommentEngine] = CommentEngine,
) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(engine_factory), host=host, port=port)
