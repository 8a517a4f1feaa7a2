"""
FastAPI server exposing accessor classification of Java source.
"""

import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from . import __version__
from .accessor import AccessorClassifier, FieldIndex
from .exceptions import CodeAnalysisError
from .java_adapter import JavaModelBuilder

logger = logging.getLogger(__name__)


# Pydantic models for API requests/responses
class ClassifyRequest(BaseModel):
    """Request model for classifying a Java compilation unit."""
    source: str = Field(..., min_length=1, description="Java source code")
    filename: Optional[str] = Field(None, description="File name, for logging only")


class AccessorItem(BaseModel):
    """One accessor method."""
    method: str = Field(..., description="Method name")
    kind: str = Field(..., description="'getter' or 'setter'")
    line: Optional[int] = Field(None, description="Line of the declaration")


class ClassResult(BaseModel):
    """Accessors of one declared type."""
    name: str = Field(..., description="Type name")
    kind: str = Field(..., description="class, interface or enum")
    method_count: int = Field(..., description="Methods and constructors declared")
    accessors: List[AccessorItem] = Field(default_factory=list)


class ClassifyResponse(BaseModel):
    """Response model for classification."""
    classes: List[ClassResult] = Field(..., description="One entry per declared type")
    accessor_count: int = Field(..., description="Total accessors found")


class HealthResponse(BaseModel):
    status: str
    message: str


app = FastAPI(
    title="accessortracker API",
    description="Find trivial getters and setters in Java source",
    version=__version__,
)

builder = JavaModelBuilder()
classifier = AccessorClassifier()


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", message="accessortracker API is running")


@app.post("/classify", response_model=ClassifyResponse)
async def classify_source(request: ClassifyRequest):
    """Classify every method of every type declared in the request source."""
    try:
        class_models = builder.parse(request.source, filename=request.filename)
    except CodeAnalysisError as e:
        logger.info(f"Rejected unparsable source {request.filename or ''}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    results = []
    for class_model in class_models:
        fields = FieldIndex.for_class(class_model)
        accessors = []
        for method in class_model.methods:
            kind = classifier.classify(class_model, method, fields)
            if kind is not None:
                accessors.append(AccessorItem(method=method.name, kind=kind.value, line=method.line))
        results.append(ClassResult(
            name=class_model.name,
            kind=class_model.declaration_kind,
            method_count=len(class_model.methods),
            accessors=accessors,
        ))

    return ClassifyResponse(
        classes=results,
        accessor_count=sum(len(r.accessors) for r in results),
    )


def run(host: str = "127.0.0.1", port: int = 8000):
    """Run the API server."""
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
