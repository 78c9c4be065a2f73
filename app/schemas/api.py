from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(
        examples=["How do I consume BioBlend+?"],
        description="The new message from the user",
    )
    session_id: str = Field(
        alias="sessionId",
        examples=["web-session-1761630008544"],
        description="Opaque identifier for the user session, passed through to the agent",
    )


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


class SuggestionsResponse(BaseModel):
    suggestions: list[str]
