# tests/crud/test_crud_user.py
from libroclub.crud import create_user, get_user_by_id, get_users
from libroclub.models.user import User # Needed for direct query checks
from libroclub.schemas.user import UserCreate, UserSchema

def test_create_user_crud(db_session):
    """Test the create_user CRUD function."""
    created_user = create_user(db=db_session, user=UserCreate(name="User 1"))

    assert created_user is not None
    assert created_user.id is not None
    assert created_user.name == "User 1"
    # Verify it's actually in the DB
    db_user = db_session.query(User).filter(User.name == "User 1").first()
    assert db_user is not None
    assert db_user.id == created_user.id
    assert UserSchema.model_validate(db_user).model_dump() == {"id": created_user.id, "name": "User 1"}

def test_get_user_by_id(db_session):
    user = create_user(db=db_session, user=UserCreate(name="Findme"))

    assert get_user_by_id(db_session, user.id).name == "Findme"
    assert get_user_by_id(db_session, 99999) is None

def test_get_users(db_session):
    """Test the get_users CRUD function."""
    create_user(db=db_session, user=UserCreate(name="User 1"))
    create_user(db=db_session, user=UserCreate(name="User 2"))

    users = get_users(db=db_session)

    assert [u.name for u in users] == ["User 1", "User 2"]
    assert len(get_users(db_session, skip=1)) == 1
