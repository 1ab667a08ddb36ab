"""Unit tests for the Model handle."""

import gc
from unittest.mock import Mock

import pytest

from domo.exceptions import ModelDisposedError
from domo.extensions import add_value, update_model
from domo.repository import AggregateRepository, ModelObserver, UpdateResult


class TestModelHandle:
    """Test identity and value access through the handle."""

    @pytest.mark.unit
    def test_identity_preserved_across_updates(self, int_repo):
        """Test updates replace the value, not the handle."""
        model = add_value(int_repo, 1)
        model_id = model.id

        model.update(lambda v: v + 1)

        assert model.id == model_id
        assert int_repo.get_model(model_id) is model
        assert model.value == 2

    @pytest.mark.unit
    def test_value_always_current(self, int_repo):
        """Test the handle reads through the repository."""
        model = add_value(int_repo, 1)
        int_repo.update(model.id, lambda v: 10)
        assert model.value == 10

    @pytest.mark.unit
    def test_value_setter(self, int_repo):
        """Test assigning value routes through update."""
        model = add_value(int_repo, 1)
        model.value = 9
        assert int_repo.get_value(model.id) == 9

    @pytest.mark.unit
    def test_update_model_helper(self, int_repo):
        """Test update_model returns the repository's outcome."""
        model = add_value(int_repo, 1)
        assert update_model(model, lambda v: v) is UpdateResult.NO_OP
        assert update_model(model, lambda v: v * 3) is UpdateResult.APPLIED
        assert model.value == 3

    @pytest.mark.unit
    def test_repository_reference_is_weak(self):
        """Test a model doesn't keep its repository alive."""
        repo = AggregateRepository(int)
        model = add_value(repo, 1)
        del repo
        gc.collect()

        with pytest.raises(ModelDisposedError):
            _ = model.value

    @pytest.mark.unit
    def test_repr(self, int_repo):
        """Test repr shows the id and disposal state."""
        model = add_value(int_repo, 1)
        assert str(model.id) in repr(model)
        int_repo.delete(model.id)
        assert "disposed" in repr(model)


class TestModelObservers:
    """Test the model's own change trigger."""

    @pytest.mark.unit
    def test_observer_notified_on_applied_update(self, int_repo):
        """Test model observers run only when an update applies."""
        model = add_value(int_repo, 1)
        observer = Mock(spec=ModelObserver)
        model.register_observer(observer)

        model.update(lambda v: v)
        observer.on_model_changed.assert_not_called()

        model.update(lambda v: v + 1)
        observer.on_model_changed.assert_called_once_with(model)

    @pytest.mark.unit
    def test_observer_not_notified_on_add(self, int_repo):
        """Test adding other models doesn't touch this model's observers."""
        model = add_value(int_repo, 1)
        callback = Mock()
        model.subscribe(callback)

        add_value(int_repo, 2)

        callback.assert_not_called()

    @pytest.mark.unit
    def test_unregister(self, int_repo):
        """Test unregistered observers are not called."""
        model = add_value(int_repo, 1)
        callback = Mock()
        observer = model.subscribe(callback)
        model.unregister_observer(observer)

        model.update(lambda v: v + 1)

        callback.assert_not_called()

    @pytest.mark.unit
    def test_dispose_drops_observers(self, int_repo):
        """Test disposing clears the model's observers."""
        model = add_value(int_repo, 1)
        model.subscribe(Mock())
        int_repo.delete(model.id)
        assert len(model._observers) == 0
