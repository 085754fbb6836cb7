"""
RestDto unit tests
"""

from types import SimpleNamespace
from typing import Optional

from restapi.domain.user import UserDto
from restapi.rest.dto import RestDto


class NameDto(RestDto):
    id: Optional[str] = None
    name: Optional[str] = None
    nickname: Optional[str] = None


def test_new_dto_has_no_visited_fields():
    assert NameDto().get_visited() == set()
    assert NameDto(name="Alice").get_visited() == {"name"}


def test_load_copies_fields_the_entity_has():
    entity = SimpleNamespace(id="42", name="Alice")
    
    dto = NameDto().load(entity)
    
    assert dto.id == "42"
    assert dto.name == "Alice"
    assert dto.nickname is None
    assert dto.get_visited() == {"id", "name"}


def test_patch_overrides_only_set_fields():
    dto = NameDto().load(SimpleNamespace(id="42", name="Alice", nickname="Al"))
    
    dto.patch(NameDto(name="Bob"))
    
    assert dto.name == "Bob"
    assert dto.nickname == "Al"


def test_patch_applies_explicit_none():
    dto = NameDto().load(SimpleNamespace(id="42", name="Alice", nickname="Al"))
    
    dto.patch(NameDto(nickname=None))
    
    assert dto.name == "Alice"
    assert dto.nickname is None


def test_patch_ignores_fields_not_declared_on_target():
    class OtherDto(RestDto):
        name: Optional[str] = None
        extra: Optional[str] = None
    
    dto = NameDto(name="Alice")
    dto.patch(OtherDto(name="Bob", extra="ignored"))
    
    assert dto.name == "Bob"
    assert not hasattr(dto, "extra")


def test_update_writes_visited_fields_except_id():
    class Entity:
        id = None
        name = None
        nickname = None
    
    entity = Entity()
    entity.id = "original"
    
    NameDto(id="changed", name="Bob").update(entity)
    
    assert entity.id == "original"
    assert entity.name == "Bob"
    assert entity.nickname is None


def test_update_skips_fields_unknown_to_entity():
    class Entity:
        name = None
    
    entity = Entity()
    NameDto(name="Bob", nickname="B").update(entity)
    
    assert entity.name == "Bob"
    assert not hasattr(entity, "nickname")


def test_user_dto_can_be_created_empty():
    dto = UserDto()
    
    assert dto.username is None
    assert dto.get_visited() == set()
