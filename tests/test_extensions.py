"""Unit tests for the typed accessor and subscription helpers."""

from unittest.mock import Mock
from uuid import UUID

import pytest

from domo.exceptions import RepositoryNotFoundError, RepositoryTypeMismatchError
from domo.extensions import (
    add_aggregate_repository,
    add_singleton_repository,
    add_typed_repository,
    add_value,
    create_aggregate_repository,
    create_singleton_repository,
    delete_all_repositories,
    get_aggregate_repository,
    get_model_dictionary,
    get_repository,
    get_singleton_repository,
    get_type_name,
    on_model_changed,
    on_models_changed,
    to_debug_string,
)
from domo.repository import AggregateRepository, SingletonRepository
from domo.settings import DomoSettings


class TestTypedFetch:
    """Test fetching repositories by value type and variant."""

    @pytest.mark.unit
    def test_get_aggregate(self, manager):
        """Test an aggregate is returned as one."""
        repo = add_aggregate_repository(manager, int)
        assert isinstance(repo, AggregateRepository)
        assert get_aggregate_repository(manager, int) is repo
        assert get_repository(manager, int) is repo

    @pytest.mark.unit
    def test_get_singleton(self, manager):
        """Test a singleton is returned as one, seeded with the given value."""
        repo = add_singleton_repository(manager, int, 7)
        assert isinstance(repo, SingletonRepository)
        assert get_singleton_repository(manager, int) is repo
        assert repo.value == 7

    @pytest.mark.unit
    def test_variant_mismatch_raises(self, manager):
        """Test asking for the wrong variant raises RepositoryTypeMismatchError."""
        add_aggregate_repository(manager, int)
        add_singleton_repository(manager, str)

        with pytest.raises(RepositoryTypeMismatchError) as exc_info:
            get_singleton_repository(manager, int)
        assert exc_info.value.actual is AggregateRepository

        with pytest.raises(TypeError):
            get_aggregate_repository(manager, str)

    @pytest.mark.unit
    def test_missing_raises(self, manager):
        """Test typed fetch of an unregistered type raises RepositoryNotFoundError."""
        with pytest.raises(RepositoryNotFoundError):
            get_aggregate_repository(manager, float)

    @pytest.mark.unit
    def test_manager_settings_propagate(self):
        """Test repositories created through the manager share its settings."""
        from domo.manager import RepositoryManager

        settings = DomoSettings(observer_errors="raise")
        manager = RepositoryManager(settings)
        assert add_aggregate_repository(manager, int).settings is settings
        assert add_singleton_repository(manager, str).settings is settings

    @pytest.mark.unit
    def test_create_and_add_typed(self, manager):
        """Test the create helpers and add_typed_repository."""
        aggregate = create_aggregate_repository(int, validator=lambda v: v > 0)
        singleton = create_singleton_repository(str, "hello")

        assert add_typed_repository(manager, aggregate) is aggregate
        assert add_typed_repository(manager, singleton) is singleton
        assert not aggregate.validate(-1)
        assert singleton.value == "hello"

    @pytest.mark.unit
    def test_delete_all_repositories(self, manager):
        """Test every repository is deleted and disposed."""
        ints = add_aggregate_repository(manager, int)
        strs = add_singleton_repository(manager, str)

        delete_all_repositories(manager)

        assert len(manager) == 0
        assert ints.is_disposed
        assert strs.is_disposed


class TestSubscriptions:
    """Test on_model_changed / on_models_changed."""

    @pytest.mark.unit
    def test_on_model_changed_added_and_updated(self, int_repo):
        """Test the callback receives the live model on add and update only."""
        action = Mock()
        on_model_changed(int_repo, action)

        model = add_value(int_repo, 1)
        action.assert_called_once_with(model)

        model.update(lambda v: v + 1)
        assert action.call_count == 2
        assert action.call_args[0][0] is model

        int_repo.delete(model.id)
        assert action.call_count == 2

    @pytest.mark.unit
    def test_on_model_changed_skips_no_op(self, int_repo):
        """Test a no-op update doesn't call back."""
        model = add_value(int_repo, 1)
        action = Mock()
        on_model_changed(int_repo, action)

        model.update(lambda v: v)

        action.assert_not_called()

    @pytest.mark.unit
    def test_on_models_changed(self, int_repo):
        """Test the callback receives the full list after every change."""
        snapshots = []
        on_models_changed(int_repo, lambda models: snapshots.append(sorted(m.value for m in models)))

        first = add_value(int_repo, 1)
        add_value(int_repo, 2)
        first.update(lambda v: 10)
        int_repo.delete(first.id)

        assert snapshots == [[1], [1, 2], [2, 10], [2]]

    @pytest.mark.unit
    def test_subscription_can_be_removed(self, int_repo):
        """Test the returned observer unsubscribes."""
        action = Mock()
        observer = on_models_changed(int_repo, action)
        int_repo.unsubscribe(observer)

        add_value(int_repo, 1)

        action.assert_not_called()


class TestDebugHelpers:
    """Test the debugging helpers."""

    @pytest.mark.unit
    def test_to_debug_string(self, int_repo):
        """Test model formatting."""
        model = add_value(int_repo, 5)
        assert to_debug_string(model) == f"{model.id} 5"
        assert to_debug_string(None) == "null"

    @pytest.mark.unit
    def test_get_type_name(self):
        """Test class names."""
        assert get_type_name(5) == "int"
        assert get_type_name(None) is None

    @pytest.mark.unit
    def test_get_model_dictionary(self, int_repo):
        """Test id -> value snapshot."""
        a = add_value(int_repo, 1)
        b = add_value(int_repo, 2)

        dictionary = get_model_dictionary(int_repo)

        assert dictionary == {a.id: 1, b.id: 2}
        assert all(isinstance(key, UUID) for key in dictionary)
