"""
HTTP API for the domain finder.

Routes:
- GET  /api/checkDomains?domain=   legacy fixed-TLD availability check
- POST /api/checkDomains           {domain, tlds?} availability check
- GET  /api/getTlds                full TLD name list
- POST /api/getTlds                {input?, pageSize?, type?} TLD search
- GET  /api/health                 liveness and configuration summary

Errors are rendered as ``{"statusCode", "statusMessage", "message"}``.
"""

from typing import Any, Optional

import httpx
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .audit_logger import AuditLogger
from .config import SystemConfig, load_config_from_env
from .exceptions import DomainFinderError, ValidationError
from .models import CheckDomainsRequest, GetTldsRequest
from .services import Services, create_services


router = APIRouter(prefix="/api")


async def _read_json(request: Request) -> Any:
    """Request body as JSON; a missing or unparsable body reads as None."""
    try:
        return await request.json()
    except ValueError:
        return None


def _services(request: Request) -> Services:
    return request.app.state.services


@router.get("/checkDomains")
async def check_domains_legacy(request: Request, domain: Optional[str] = None) -> dict:
    return await _services(request).orchestrator.check_legacy(domain)


@router.post("/checkDomains")
async def check_domains(request: Request) -> dict:
    body = await _read_json(request)
    return await _services(request).orchestrator.check(CheckDomainsRequest.from_body(body))


@router.get("/getTlds")
async def get_all_tlds(request: Request) -> list[str]:
    return await _services(request).tld_lookup.list_all()


@router.post("/getTlds")
async def get_tlds(request: Request) -> list[str]:
    body = await _read_json(request)
    return await _services(request).tld_lookup.lookup(GetTldsRequest.from_body(body))


@router.get("/health")
async def health(request: Request) -> dict:
    services = _services(request)
    return {
        "status": "ok",
        "version": __version__,
        "tldSource": services.tld_lookup.source.name,
        "registrarConfigured": services.config.registrar.has_credentials,
    }


async def handle_domain_finder_error(request: Request, exc: DomainFinderError) -> JSONResponse:
    """Render service errors without their server-side details."""
    logger: AuditLogger = request.app.state.services.logger
    if isinstance(exc, ValidationError):
        logger.debug("api", "Rejected request", {
            "path": request.url.path,
            "code": exc.code,
        })
    else:
        logger.warn("api", "Request failed", {
            "path": request.url.path,
            "code": exc.code,
            "status_code": exc.status_code,
        })

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "statusCode": exc.status_code,
            "statusMessage": exc.message,
            "message": exc.message,
        },
    )


def create_app(
    config: Optional[SystemConfig] = None,
    services: Optional[Services] = None,
    logger: Optional[AuditLogger] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: System configuration; read from the environment when omitted
        services: Prebuilt services (tests); built from ``config`` otherwise
        logger: Optional logger passed to the service wiring
        transport: Optional httpx transport for all upstream calls

    Returns:
        Configured FastAPI app
    """
    if services is None:
        if config is None:
            config = load_config_from_env()
        services = create_services(config, logger=logger, transport=transport)

    app = FastAPI(
        title="Domain Finder API",
        description="Domain availability checks and TLD search",
        version=__version__,
    )
    app.state.services = services
    app.include_router(router)
    app.add_exception_handler(DomainFinderError, handle_domain_finder_error)

    return app
