import logging
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from facerec.config.settings import get_settings
from facerec.data.database import engine, get_db
from facerec.errors import FaceRecAPIError
from facerec.model.models import Base
from facerec.routes import face_rec_routes, reset
from facerec.routes.user import router as user_router

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s v%s (%s)", settings.app_name, settings.app_version, settings.environment)
    # Criar tabelas no banco
    Base.metadata.create_all(bind=engine)
    yield
    engine.dispose()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Face Recognition Registry API",
    description="API para gerenciamento de usuários e dos seus conjuntos de imagens faciais",
    version=settings.app_version,
    lifespan=lifespan,
)

# Configuração de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Incluir rotas
app.include_router(user_router, prefix="/user", tags=["Users"])
app.include_router(face_rec_routes.router, prefix="/faceRec")
app.include_router(reset.router, prefix="/reset", tags=["Reset"])


@app.exception_handler(FaceRecAPIError)
async def face_rec_api_error_handler(request: Request, exc: FaceRecAPIError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": "Bad user input."})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "API de registro facial está online e funcional!"}


@app.get("/health", tags=["Root"])
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database health check failed: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "unreachable"},
        )
    return {"status": "healthy", "version": settings.app_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("facerec.main:app", host="0.0.0.0", port=3000, log_level=settings.log_level.lower())
