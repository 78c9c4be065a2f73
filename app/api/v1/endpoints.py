from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from app.schemas.api import ChatRequest, ChatResponse, ErrorResponse, SuggestionsResponse
from app.services import svc
from app.services.agent_chat.dispatcher import ResponseDispatcher
import logging
import threading

logger = logging.getLogger("services")
router = APIRouter()

class SingletonDispatcher:
    def __init__(self) -> None:
        # Built on first use so importing the app never touches AWS
        self.dispatcher: ResponseDispatcher | None = None
        self._lock = threading.Lock()

    def get(self) -> ResponseDispatcher:
        # Sync endpoints run in the threadpool; build the boto3 client only once
        if self.dispatcher is None:
            with self._lock:
                if self.dispatcher is None:
                    self.dispatcher = ResponseDispatcher(logger)
        return self.dispatcher

agent_dispatcher = SingletonDispatcher()

def get_dispatcher() -> ResponseDispatcher:
    """FastAPI dependency to provide the shared response dispatcher."""
    return agent_dispatcher.get()


@router.get("/suggestions", response_model=SuggestionsResponse)
async def suggestions():
    return SuggestionsResponse(suggestions=svc.suggestions())


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def chat(req: ChatRequest, dispatcher: ResponseDispatcher = Depends(get_dispatcher)):
    result = svc.chat(dispatcher, req.message, req.session_id)
    if not result.ok:
        logger.warning(f"Chat for session {req.session_id} failed with {result.status_code}: {result.error}")
        return JSONResponse(status_code=result.status_code, content=result.to_payload())
    return ChatResponse(response=result.response)
