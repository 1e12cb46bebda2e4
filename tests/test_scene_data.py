import uuid

import pytest

from pengin.scene_data import SceneData


def test_default_name():
    assert SceneData().name == "No Scene Name"


def test_set_and_get_player():
    data = SceneData()
    user, player = uuid.uuid4(), uuid.uuid4()
    data.set_player_uuid(user, player)
    assert data.player_uuid(user) == player
    assert data.player_uuids == [player]
    assert data.index_to_user == {0: user}


def test_replace_player_keeps_slot():
    data = SceneData()
    user = uuid.uuid4()
    first, second = uuid.uuid4(), uuid.uuid4()
    data.set_player_uuid(user, first)
    data.set_player_uuid(user, second)
    assert data.player_uuids == [second]
    assert data.player_uuid(user) == second


def test_missing_user_raises():
    with pytest.raises(KeyError):
        SceneData().player_uuid(uuid.uuid4())


def test_remove_unknown_user_returns_false():
    data = SceneData()
    data.set_player_uuid(uuid.uuid4(), uuid.uuid4())
    assert data.remove_player(uuid.uuid4()) is False
    assert len(data.player_uuids) == 1


def test_remove_middle_player_moves_last_into_slot():
    data = SceneData()
    users = [uuid.uuid4() for _ in range(3)]
    players = [uuid.uuid4() for _ in range(3)]
    for user, player in zip(users, players):
        data.set_player_uuid(user, player)

    assert data.remove_player(users[0]) is True
    assert data.player_uuids == [players[2], players[1]]
    assert data.player_uuid(users[2]) == players[2]
    assert data.player_uuid(users[1]) == players[1]
    assert data.index_to_user == {0: users[2], 1: users[1]}
    with pytest.raises(KeyError):
        data.player_uuid(users[0])


def test_remove_last_player():
    data = SceneData()
    users = [uuid.uuid4(), uuid.uuid4()]
    players = [uuid.uuid4(), uuid.uuid4()]
    for user, player in zip(users, players):
        data.set_player_uuid(user, player)

    assert data.remove_player(users[1]) is True
    assert data.player_uuids == [players[0]]
    assert data.user_to_index == {users[0]: 0}
    assert data.index_to_user == {0: users[0]}


def test_remove_with_lookup_function():
    data = SceneData()
    users = [uuid.uuid4(), uuid.uuid4()]
    players = [uuid.uuid4(), uuid.uuid4()]
    for user, player in zip(users, players):
        data.set_player_uuid(user, player)
    owners = dict(zip(players, users))

    assert data.remove_player(users[0], owners.__getitem__) is True
    assert data.player_uuid(users[1]) == players[1]
    assert data.user_to_index == {users[1]: 0}