# crm/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crm.infrastructure.config import get_settings
from crm.infrastructure.log import log


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from crm.infrastructure.memory_store import get_repo
    get_repo()  # carrega o quadro (e os exemplos) no startup
    if not get_settings().gemini_api_key:
        log("GEMINI_API_KEY nao encontrada. O resumo de interacoes ficara desabilitado.", "AVISO")
    yield


app = FastAPI(
    title="CRM Board API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173"],
    allow_methods=["GET", "POST", "PUT", "PATCH"],
    allow_headers=["*"],
)

from crm.interfaces.api.routes.dashboard_routes import router as dashboard_router  # noqa: E402
from crm.interfaces.api.routes.empresa_routes import router as empresa_router  # noqa: E402
from crm.interfaces.api.routes.quadro_routes import router as quadro_router  # noqa: E402
from crm.interfaces.api.routes.resumo_routes import router as resumo_router  # noqa: E402

app.include_router(empresa_router, prefix="/api")
app.include_router(resumo_router, prefix="/api")
app.include_router(quadro_router, prefix="/api")
app.include_router(dashboard_router, prefix="/api")
