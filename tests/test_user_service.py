import pytest

from todo_api.core.exceptions import AppError
from todo_api.models.user import User


async def test_create_hashes_password(user_service):
    user = await user_service.create(User(username="bob"), "builder")
    assert user.id is not None
    assert user.password_hash and user.password_salt
    assert b"builder" not in user.password_hash


async def test_create_requires_password(user_service):
    with pytest.raises(AppError, match="Password is required"):
        await user_service.create(User(username="bob"), "   ")


async def test_create_rejects_duplicate_username(user_service):
    await user_service.create(User(username="bob"), "builder")
    with pytest.raises(AppError, match='Username "bob" is already taken'):
        await user_service.create(User(username="bob"), "other")
    assert len(await user_service.get_all_users()) == 1


async def test_authenticate(user_service):
    created = await user_service.create(User(username="bob"), "builder")
    user = await user_service.authenticate("bob", "builder")
    assert user.id == created.id

    assert await user_service.authenticate("bob", "wrong") is None
    assert await user_service.authenticate("nobody", "builder") is None
    assert await user_service.authenticate("bob", "") is None


async def test_update_with_password_rehashes(user_service):
    created = await user_service.create(User(username="bob"), "builder")

    await user_service.update_user(User(id=created.id, username="bob"), "new-password")

    stored = await user_service.get_by_id(created.id)
    assert stored.password_hash != created.password_hash
    assert await user_service.authenticate("bob", "new-password") is not None
    assert await user_service.authenticate("bob", "builder") is None


async def test_update_without_password_keeps_hash(user_service):
    created = await user_service.create(User(username="bob"), "builder")

    await user_service.update_user(User(id=created.id, username="robert"), None)

    stored = await user_service.get_by_id(created.id)
    assert stored.username == "robert"
    assert stored.password_hash == created.password_hash
    assert stored.password_salt == created.password_salt


async def test_update_unknown_user(user_service):
    with pytest.raises(AppError, match="User not found"):
        await user_service.update_user(User(id=99, username="ghost"), None)


async def test_update_to_taken_username(user_service):
    await user_service.create(User(username="bob"), "builder")
    carol = await user_service.create(User(username="carol"), "singer")
    with pytest.raises(AppError, match='Username "bob" is already taken'):
        await user_service.update_user(User(id=carol.id, username="bob"), None)


async def test_delete_is_idempotent(user_service):
    await user_service.delete_user(12345)


async def test_delete_cascades_to_todo_items(user_service, add_todos):
    bob = await user_service.create(User(username="bob"), "builder")
    await add_todos(bob.id, "milk", "eggs")

    await user_service.delete_user(bob.id)

    assert await user_service.get_by_id(bob.id) is None
    assert await user_service.get_user_todos("bob") == []


async def test_get_user_todos(user_service, add_todos):
    bob = await user_service.create(User(username="bob"), "builder")
    carol = await user_service.create(User(username="carol"), "singer")
    await add_todos(bob.id, "milk", "eggs")
    await add_todos(carol.id, "guitar")

    items = await user_service.get_user_todos("bob")
    assert [item.name for item in items] == ["milk", "eggs"]
    assert all(item.user_id == bob.id for item in items)


async def test_create_requires_username(user_service):
    for username in ["", "   ", None]:
        with pytest.raises(AppError, match="Username is required"):
            await user_service.create(User(username=username), "builder")
    assert await user_service.get_all_users() == []


async def test_update_with_blank_username_keeps_it(user_service):
    created = await user_service.create(User(username="bob"), "builder")

    await user_service.update_user(User(id=created.id, username="   "), None)

    assert (await user_service.get_by_id(created.id)).username == "bob"
