"""Pydantic models for API requests and responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessageModel(BaseModel):
    """A single message in the chat history."""

    role: str = Field(..., description="Role of the message sender (user, assistant)")
    content: str = Field(..., description="Content of the message")


class ChatRequest(BaseModel):
    """Request model for chatting with the coach."""

    prompt: str = Field(
        ...,
        min_length=1,
        max_length=4000,
        description="The user's message",
        json_schema_extra={"example": "How do I handle price objections?"},
    )
    history: list[ChatMessageModel] = Field(default_factory=list, description="Earlier turns")
    type: Literal["chat", "practice"] = Field("chat", description="Coach persona")


class TokenUsageModel(BaseModel):
    """Estimated token usage."""

    model_config = ConfigDict(populate_by_name=True)

    prompt_tokens: int = Field(0, alias="promptTokens")
    completion_tokens: int = Field(0, alias="completionTokens")
    total_tokens: int = Field(0, alias="totalTokens")


class RelevantDocumentModel(BaseModel):
    """A training document selected for a query."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    category: str
    content: str
    relevance_score: int = Field(..., ge=0, alias="relevanceScore")


class ChatResponse(BaseModel):
    """Response model for a coach reply."""

    model_config = ConfigDict(populate_by_name=True)

    response: str = Field(..., description="The coach's reply")
    token_usage: TokenUsageModel = Field(..., alias="tokenUsage")
    documents: list[RelevantDocumentModel] = Field(
        default_factory=list, description="Training documents used as reference"
    )


class AnalyzeRequest(BaseModel):
    """Request model for content analysis."""

    model_config = ConfigDict(populate_by_name=True)

    content_type: str = Field("text", alias="contentType", description="Kind of content")
    content: str = Field(..., min_length=1, description="Content to analyze")
    additional_context: str | None = Field(None, alias="additionalContext")


class AnalyzeResponse(BaseModel):
    """Response model for content analysis."""

    model_config = ConfigDict(populate_by_name=True)

    analysis: dict = Field(..., description="Structured analysis")
    token_usage: TokenUsageModel = Field(..., alias="tokenUsage")


class SelectRequest(BaseModel):
    """Request model for relevance selection."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., min_length=1, max_length=4000)
    max_documents: int = Field(3, ge=1, le=20, alias="maxDocuments")


class SelectResponse(BaseModel):
    """Selected documents and their categories."""

    documents: list[RelevantDocumentModel] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class DocumentSummaryModel(BaseModel):
    """Training document metadata."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    category: str
    source: str
    created_at: str | None = Field(None, alias="createdAt")
    content_preview: str = Field(..., alias="contentPreview")


class DocumentListResponse(BaseModel):
    success: bool = True
    documents: list[DocumentSummaryModel] = Field(default_factory=list)
    count: int = 0


class DocumentResponse(BaseModel):
    success: bool = True
    document: dict


class RefreshResponse(BaseModel):
    success: bool = True
    message: str
    count: int


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
    training_documents: str = Field(..., description="Training corpus status")


class ErrorDetail(BaseModel):
    """Structured error detail information."""

    type: str = Field(..., description="Exception type name")
    code: str = Field(..., description="Error code (e.g., SC_TRN_002)")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Response model for structured errors."""

    error: ErrorDetail
    location: dict | None = Field(None, description="Source location of the error")
    context: dict | None = Field(None, description="Additional debugging context")
    cause: dict | None = Field(None, description="Underlying exception")
    stack_trace: list[str] | None = Field(None, description="Stack trace (debug mode only)")
