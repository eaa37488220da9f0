import os
import threading

from actionkit.env import EnvMap, OsEnv


def test_get_env_map():
    input_name = "SOME_NAME"
    env = EnvMap([(input_name, "SET")])
    assert env.get(input_name) == "SET"


def test_set_env_map():
    input_name = "SOME_NAME"
    env = EnvMap()
    env.set(input_name, "SET")
    assert env.get(input_name) == "SET"


def test_env_map_missing_key():
    env = EnvMap({"A": "1"})
    assert env.get("B") is None


def test_env_map_overwrite():
    env = EnvMap({"A": "1"})
    env.set("A", "2")
    assert env.get("A") == "2"


def test_env_map_does_not_alias_source():
    source = {"A": "1"}
    env = EnvMap(source)
    env.set("A", "2")
    assert source["A"] == "1"


def test_env_map_concurrent_writes():
    env = EnvMap()

    def write(index):
        env.set(f"KEY_{index}", str(index))

    threads = [threading.Thread(target=write, args=(i,)) for i in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert [env.get(f"KEY_{i}") for i in range(20)] == [str(i) for i in range(20)]


def test_os_env_get(monkeypatch):
    monkeypatch.setenv("ACTIONKIT_TEST_VAR", "SET")
    assert OsEnv().get("ACTIONKIT_TEST_VAR") == "SET"


def test_os_env_get_missing(monkeypatch):
    monkeypatch.delenv("ACTIONKIT_TEST_VAR", raising=False)
    assert OsEnv().get("ACTIONKIT_TEST_VAR") is None


def test_os_env_set(monkeypatch):
    monkeypatch.setenv("ACTIONKIT_TEST_VAR", "OLD")
    env = OsEnv()
    env.set("ACTIONKIT_TEST_VAR", "NEW")
    assert env.get("ACTIONKIT_TEST_VAR") == "NEW"
    assert os.environ["ACTIONKIT_TEST_VAR"] == "NEW"