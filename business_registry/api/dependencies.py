from fastapi import Request

from business_registry.config import Settings
from business_registry.core.mutation_engine import MutationEngine
from business_registry.core.query_engine import QueryEngine
from business_registry.storage import JsonRecordStore


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with"""
    return request.app.state.settings


def get_store(request: Request) -> JsonRecordStore:
    return request.app.state.store


def get_mutation_engine(request: Request) -> MutationEngine:
    return request.app.state.mutation_engine


def get_query_engine(request: Request) -> QueryEngine:
    return request.app.state.query_engine
