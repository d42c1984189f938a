# file: services/container.py

from dataclasses import dataclass

from fastapi import Request

from database.db import UserStore
from services.email_service import MailService
from services.firebase_app import init_firebase
from services.push_service import PushService
from utils.config import Settings


@dataclass(frozen=True)
class Services:
    """Long-lived clients shared by every request."""
    push: PushService
    users: UserStore
    mail: MailService


def build_services(settings: Settings) -> Services:
    app = init_firebase(settings)
    return Services(
        push=PushService(app),
        users=UserStore.from_app(app, settings.users_collection),
        mail=MailService.from_settings(settings),
    )


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_push_service(request: Request) -> PushService:
    return get_services(request).push


def get_user_store(request: Request) -> UserStore:
    return get_services(request).users


def get_mail_service(request: Request) -> MailService:
    return get_services(request).mail
