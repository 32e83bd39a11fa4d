import pytest

from wirebox.container import Container
from wirebox.exceptions import KeyIsNotDefinedError


def test_set_and_get_value(container: Container) -> None:
    container.set("key", "value")

    assert container.get("key") == "value"


def test_get_unknown_key_raises(container: Container) -> None:
    with pytest.raises(KeyIsNotDefinedError) as exc_info:
        container.get("missing")

    assert exc_info.value.key == "missing"
    assert str(exc_info.value) == 'Key "missing" is not defined.'


def test_has_and_unset_scenario(container: Container) -> None:
    container.set("appName", "My App")
    container.set("version", "1.0.0")

    assert container.has("appName") is True

    container.unset("appName")

    assert container.has("appName") is False
    assert container.has("version") is True


def test_unset_unknown_key_is_noop(container: Container) -> None:
    container.set("key", "value")

    container.unset("missing")

    assert container.keys() == ["key"]


def test_keys_keep_registration_order(container: Container) -> None:
    container.set("b", 1)
    container.set("a", 2)
    container.set("b", 3)

    assert container.keys() == ["b", "a"]


def test_class_keys_are_stored_by_name(container: Container) -> None:
    class Settings:
        pass

    settings = Settings()
    container.set(Settings, settings)

    assert container.has("Settings")
    assert container.get(Settings) is settings
    assert container.get("Settings") is settings


def test_non_string_keys_are_rejected(container: Container) -> None:
    with pytest.raises(TypeError):
        container.set(42, "value")  # type: ignore[arg-type]


def test_initial_values_are_registered() -> None:
    container = Container({"key1": "value1", "key2": lambda c: "value2"})

    assert container.get("key1") == "value1"
    assert container.get("key2") == "value2"
    assert container.is_frozen("key2")


def test_containers_are_isolated() -> None:
    first = Container()
    second = Container()

    first.set("only_first", 1)

    assert first.has("only_first")
    assert not second.has("only_first")
    with pytest.raises(KeyIsNotDefinedError):
        second.get("only_first")


def test_clear_removes_everything(container: Container) -> None:
    class Service:
        pass

    container.set("value", 1)
    container.set("lazy", lambda c: object())
    container.get("lazy")
    container.bind(Service, [])
    container.get(Service)

    container.clear()

    assert container.keys() == []
    assert not container.has(Service)
    assert not container.is_frozen("lazy")
    container.set("lazy", "redefined")
    assert container.get("lazy") == "redefined"


def test_dispose_clears_container(container: Container) -> None:
    container.set("key", "value")

    container.dispose()

    assert not container.has("key")


def test_context_manager_disposes_on_exit() -> None:
    with Container({"key": "value"}) as container:
        assert container.get("key") == "value"

    assert container.keys() == []


class TestMappingProtocol:
    def test_item_access(self, container: Container) -> None:
        container["key"] = "value"

        assert container["key"] == "value"
        assert "key" in container
        assert "missing" not in container

    def test_delete_item(self, container: Container) -> None:
        container["key"] = "value"

        del container["key"]

        assert "key" not in container

    def test_iteration_and_length(self, container: Container) -> None:
        container["a"] = 1
        container["b"] = 2

        assert list(container) == ["a", "b"]
        assert len(container) == 2

    def test_contains_tolerates_invalid_keys(self, container: Container) -> None:
        assert 42 not in container

    def test_missing_item_raises(self, container: Container) -> None:
        with pytest.raises(KeyIsNotDefinedError):
            container["missing"]
