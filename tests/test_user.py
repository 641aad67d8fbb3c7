from socialgraph.user import User


def test_default_user_has_documented_values():
    user = User()
    assert user.id == 0
    assert user.name == ""
    assert user.year == 1934
    assert user.zip_code == 89591
    assert user.friends == set()


def test_default_users_do_not_share_friends():
    first = User()
    second = User()
    first.add_friend(3)
    assert second.friends == set()
    assert first.friends == {3}


def test_constructor_keeps_values():
    user = User(2, "Jason Chen", 2001, 95053, {1, 4})
    assert user.id == 2
    assert user.name == "Jason Chen"
    assert user.year == 2001
    assert user.zip_code == 95053
    assert user.friends == {1, 4}


def test_add_friend_ignores_duplicates():
    user = User(0, "Aled Montes", 2001, 95053)
    user.add_friend(5)
    user.add_friend(5)
    assert user.friends == {5}


def test_delete_friend_removes_and_tolerates_missing():
    user = User(0, "Aled Montes", 2001, 95053, {1, 2})
    user.delete_friend(1)
    user.delete_friend(7)
    assert user.friends == {2}