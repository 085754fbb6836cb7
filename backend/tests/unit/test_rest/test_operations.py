"""
Resource CRUD operation tests
"""

import pytest
import pytest_asyncio

from restapi.common.errors import ConfigurationError, NotFoundError, ValidationError
from restapi.domain.user import UserDto
from restapi.resources import LogLoginSuccessResource, UserResource
from restapi.rest.validator import PydanticValidator


@pytest_asyncio.fixture
async def user_resource(user_repo) -> UserResource:
    return UserResource(user_repo, PydanticValidator())


def _violation_paths(error: ValidationError) -> set[str]:
    return {violation["property_path"] for violation in error.details["violations"]}


@pytest.mark.asyncio
class TestRead:
    async def test_find(self, user_resource, users):
        result = await user_resource.find({"last_name": "Doe"}, {"username": "ASC"})
        
        assert [user.username for user in result] == ["jane", "john"]
    
    async def test_find_without_criteria(self, user_resource, users):
        assert len(await user_resource.find()) == 3
    
    async def test_find_one(self, user_resource, users):
        assert await user_resource.find_one(users["john"].id) is users["john"]
        assert await user_resource.find_one("missing") is None
    
    async def test_find_one_throws(self, user_resource, users):
        with pytest.raises(NotFoundError):
            await user_resource.find_one("missing", throw_exception_if_not_found=True)
    
    async def test_find_one_by(self, user_resource, users):
        user = await user_resource.find_one_by({"email": "alice@example.org"})
        assert user is users["alice"]
        
        with pytest.raises(NotFoundError):
            await user_resource.find_one_by({"email": "nobody@example.org"}, throw_exception_if_not_found=True)
    
    async def test_count_and_ids(self, user_resource, users):
        assert await user_resource.count() == 3
        assert await user_resource.count(search="doe") == 2
        assert await user_resource.get_ids({"username": "alice"}) == [users["alice"].id]


@pytest.mark.asyncio
class TestCreate:
    async def test_create(self, user_resource, user_repo):
        dto = UserDto(username="bob", first_name="Bob", last_name="Builder", email="bob@example.com")
        
        user = await user_resource.create(dto)
        
        assert user.id is not None
        assert user.username == "bob"
        assert await user_repo.find_by_id(user.id) is user
    
    async def test_create_ignores_given_id(self, user_resource):
        dto = UserDto(id="chosen-id", username="bob", first_name="Bob", last_name="Builder", email="bob@example.com")
        
        user = await user_resource.create(dto)
        
        assert user.id != "chosen-id"
    
    async def test_create_invalid(self, user_resource, user_repo):
        dto = UserDto(username="b", email="not-an-email")
        
        with pytest.raises(ValidationError) as exc_info:
            await user_resource.create(dto)
        
        assert exc_info.value.status_code == 422
        assert _violation_paths(exc_info.value) == {"username", "first_name", "last_name", "email"}
        assert await user_repo.count_advanced() == 0
    
    async def test_create_without_form_type(self, log_repo):
        resource = LogLoginSuccessResource(log_repo, PydanticValidator())
        
        with pytest.raises(ConfigurationError):
            await resource.create(UserDto())


@pytest.mark.asyncio
class TestUpdate:
    async def test_update(self, user_resource, users):
        john = users["john"]
        dto = UserDto(username="johnny", first_name="Johnny", last_name="Doe", email="johnny@example.com")
        
        updated = await user_resource.update(john.id, dto)
        
        assert updated.id == john.id
        assert updated.username == "johnny"
        assert updated.email == "johnny@example.com"
    
    async def test_update_requires_all_form_fields(self, user_resource, users):
        with pytest.raises(ValidationError) as exc_info:
            await user_resource.update(users["john"].id, UserDto(first_name="Johnny"))
        
        assert _violation_paths(exc_info.value) == {"username", "last_name", "email"}
    
    async def test_update_missing(self, user_resource):
        dto = UserDto(username="johnny", first_name="Johnny", last_name="Doe", email="johnny@example.com")
        
        with pytest.raises(NotFoundError):
            await user_resource.update("missing", dto)


@pytest.mark.asyncio
class TestPatch:
    async def test_patch_changes_only_given_fields(self, user_resource, users):
        jane = users["jane"]
        
        patched = await user_resource.patch(jane.id, UserDto(last_name="Smith"))
        
        assert patched.last_name == "Smith"
        assert patched.first_name == "Jane"
        assert patched.email == "jane.doe@example.com"
    
    async def test_patch_validates_merged_data(self, user_resource, users):
        jane = users["jane"]
        
        with pytest.raises(ValidationError) as exc_info:
            await user_resource.patch(jane.id, UserDto(email="broken"))
        
        assert _violation_paths(exc_info.value) == {"email"}
        assert jane.email == "jane.doe@example.com"
    
    async def test_patch_missing(self, user_resource):
        with pytest.raises(NotFoundError):
            await user_resource.patch("missing", UserDto(last_name="Smith"))


@pytest.mark.asyncio
class TestDelete:
    async def test_delete(self, user_resource, user_repo, users):
        alice = users["alice"]
        
        deleted = await user_resource.delete(alice.id)
        
        assert deleted.username == "alice"
        assert await user_repo.find_by_id(alice.id) is None
    
    async def test_delete_cascades_to_login_logs(self, user_resource, log_repo, users, login_logs):
        await user_resource.delete(users["john"].id)
        
        assert await log_repo.count_advanced() == 1
    
    async def test_delete_missing(self, user_resource):
        with pytest.raises(NotFoundError):
            await user_resource.delete("missing")
