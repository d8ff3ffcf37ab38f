"""
Guardian account routes.

Each route builds its controller for the request's database session, hands it
a framework independent HttpRequest and renders the HttpResponse as JSON.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..db import get_db
from ..factories import (
    make_auth_middleware,
    make_email_service,
    make_forget_password_controller,
    make_guardian_profile_controller,
    make_login_controller,
    make_reset_password_controller,
    make_signup_controller,
)
from ..http import HttpRequest, HttpResponse
from ..protocols import Controller, EmailService

router = APIRouter(tags=["guardian"])


def get_email_service() -> EmailService:
    return make_email_service()


async def to_http_request(request: Request) -> HttpRequest:
    # An unreadable or non-object body is handled as an empty one
    try:
        body = await request.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}
    return HttpRequest(body=body, headers=dict(request.headers))


def render(response: HttpResponse) -> JSONResponse:
    if 200 <= response.status_code <= 299:
        content = response.body
        if isinstance(content, BaseModel):
            content = content.model_dump(by_alias=True, mode="json")
    else:
        content = {"error": str(response.body)}
    return JSONResponse(status_code=response.status_code, content=content)


async def dispatch(controller: Controller, http_request: HttpRequest) -> JSONResponse:
    # Controllers and repositories are synchronous
    response = await run_in_threadpool(controller.handle, http_request)
    return render(response)


@router.post("/signup")
async def signup(request: Request, db: Session = Depends(get_db)):
    return await dispatch(make_signup_controller(db), await to_http_request(request))


@router.post("/login")
async def login(request: Request, db: Session = Depends(get_db)):
    return await dispatch(make_login_controller(db), await to_http_request(request))


@router.post("/forget-password")
async def forget_password(
    request: Request,
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
):
    controller = make_forget_password_controller(db, email_service)
    return await dispatch(controller, await to_http_request(request))


@router.post("/reset-password")
async def reset_password(request: Request, db: Session = Depends(get_db)):
    return await dispatch(make_reset_password_controller(db), await to_http_request(request))


@router.get("/guardian/me")
async def guardian_profile(request: Request, db: Session = Depends(get_db)):
    http_request = HttpRequest(headers=dict(request.headers))
    auth = await run_in_threadpool(make_auth_middleware(db).handle, http_request)
    if auth.status_code != 200:
        return render(auth)

    http_request.guardian_id = auth.body["guardian_id"]
    return await dispatch(make_guardian_profile_controller(db), http_request)
