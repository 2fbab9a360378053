from fastapi import Depends, HTTPException, Request
from pymongo.database import Database

from adapter.mongodb.user_repository import MongoUserRepository
from port.password_hasher import PasswordHasher
from port.token_service import TokenService
from port.user_repository import UserRepository


def get_db(request: Request) -> Database:
    """Get the MongoDB database owned by the app, raising 503 if unavailable."""
    client = request.app.state.mongo_client
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[request.app.state.settings.database_name]


def get_user_repo(db: Database = Depends(get_db)) -> UserRepository:
    return MongoUserRepository(db)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service
