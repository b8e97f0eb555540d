from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import check_api_keys_on_startup, logger
from exceptions import TruthGuardException, ValidationException
from middleware import RequestContextMiddleware, get_request_id
from models import FactCheckPayload, FactCheckResult
from services import FactCheckOrchestrator, build_orchestrator

app = FastAPI(title="TruthGuard API")

@app.on_event("startup")
async def startup_event():
    check_api_keys_on_startup()
    logger.info("Active capabilities: %s", build_orchestrator().describe())

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestContextMiddleware)

@app.exception_handler(TruthGuardException)
async def truthguard_exception_handler(request: Request, exc: TruthGuardException):
    status_code = 400 if isinstance(exc, ValidationException) else 500
    return JSONResponse(status_code=status_code, content=exc.to_dict())

def get_orchestrator() -> FactCheckOrchestrator:
    """Built per request so capability selection follows the current environment."""
    return build_orchestrator()

@app.get("/")
async def health_check():
    return {"status": "ok", "message": "TruthGuard API is running."}

@app.get("/api/v1/capabilities")
async def capabilities(orchestrator: FactCheckOrchestrator = Depends(get_orchestrator)):
    return orchestrator.describe()

@app.post("/api/v1/fact-check", response_model=FactCheckResult)
async def fact_check(
    request: FactCheckPayload,
    orchestrator: FactCheckOrchestrator = Depends(get_orchestrator),
):
    if not request.has_input():
        raise ValidationException(
            "input", "At least one of inputText, inputUrl, or inputImageUrl is required"
        )

    result = await orchestrator.run(request)
    logger.info(
        "Fact-check %s: verdict=%s credibility=%d methods=%s",
        get_request_id(), result.verdict.value, result.credibility, ",".join(result.methods)
    )
    return result
