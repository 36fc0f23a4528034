"""Service layer for tags."""

from personal_finance_api.app.core.db import TAGS
from personal_finance_api.app.schemas.tag import TagCreate, TagRead
from personal_finance_api.app.services.base import MongoEntityService
from personal_finance_api.app.services.interfaces import TagsServiceInterface


class TagsService(MongoEntityService[TagCreate, TagRead], TagsServiceInterface):
    collection_name = TAGS
    read_model = TagRead
