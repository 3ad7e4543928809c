from __future__ import annotations

import asyncio

import pytest

from signup_api.factories import SignUpFactory
from signup_api.repositories.in_memory import InMemoryUserRepository
from signup_api.use_cases.sign_up import SignUpRequest, SignUpUseCase, UserAlreadyExistsError


@pytest.mark.asyncio
async def test_sign_up_persists_new_user():
    repo = InMemoryUserRepository()
    use_case = SignUpUseCase(repo)

    user = await use_case.handle(SignUpRequest(name="Ana", email="ana@x.com", password="secret"))

    assert user.id
    assert (user.name, user.email, user.password) == ("Ana", "ana@x.com", "secret")
    assert await repo.find_by_email("ana@x.com") is user


@pytest.mark.asyncio
async def test_second_sign_up_with_same_email_is_rejected():
    repo = InMemoryUserRepository()
    use_case = SignUpUseCase(repo)
    first = await use_case.handle(SignUpRequest(name="Ana", email="ana@x.com", password="secret"))

    with pytest.raises(UserAlreadyExistsError) as exc:
        await use_case.handle(SignUpRequest(name="Other", email="ana@x.com", password="x"))

    assert str(exc.value) == "User already exists."
    assert exc.value.email == "ana@x.com"
    assert await repo.find_by_email("ana@x.com") is first


@pytest.mark.asyncio
async def test_each_sign_up_gets_a_distinct_id():
    use_case = SignUpFactory.create()
    a = await use_case.handle(SignUpRequest(name="A", email="a@x.com", password="p"))
    b = await use_case.handle(SignUpRequest(name="B", email="b@x.com", password="p"))
    assert a.id != b.id


@pytest.mark.asyncio
async def test_concurrent_sign_ups_store_one_user():
    class _SlowRepo(InMemoryUserRepository):
        async def find_by_email(self, email):
            found = await super().find_by_email(email)
            # Yield so the other request gets a turn between lookup and create.
            await asyncio.sleep(0)
            return found

    repo = _SlowRepo()
    use_case = SignUpFactory.create(repo)
    req = SignUpRequest(name="Ana", email="ana@x.com", password="secret")

    results = await asyncio.gather(use_case.handle(req), use_case.handle(req), return_exceptions=True)

    created = [r for r in results if not isinstance(r, Exception)]
    rejected = [r for r in results if isinstance(r, UserAlreadyExistsError)]
    assert len(created) == 1
    assert len(rejected) == 1


@pytest.mark.asyncio
async def test_factory_uses_injected_repository():
    repo = InMemoryUserRepository()
    use_case = SignUpFactory.create(repo)

    user = await use_case.handle(SignUpRequest(name="Ana", email="ana@x.com", password="secret"))

    assert await repo.find_by_email("ana@x.com") is user
