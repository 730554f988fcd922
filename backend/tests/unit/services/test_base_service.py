# backend/tests/unit/services/test_base_service.py
"""
Unit tests for BaseService transaction handling and operation metrics.
"""

from unittest.mock import Mock, patch

import pytest
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from carwash.core.exceptions import ValidationException
from carwash.services.base import BaseService


class MeasuredService(BaseService):
    @BaseService.measure_operation("do_work")
    def do_work(self, value):
        if value < 0:
            raise ValidationException("negative")
        return value * 2


@pytest.fixture
def service():
    svc = MeasuredService(Mock(spec=Session))
    svc.reset_metrics()
    return svc


class TestTransactionManagement:
    def test_commits_on_success(self):
        mock_db = Mock(spec=Session)
        service = BaseService(mock_db)

        with service.transaction() as session:
            assert session is mock_db

        mock_db.commit.assert_called_once()
        mock_db.rollback.assert_not_called()

    def test_rolls_back_and_reraises_original_error(self):
        mock_db = Mock(spec=Session)
        service = BaseService(mock_db)
        error = SQLAlchemyError("Database connection lost")

        with pytest.raises(SQLAlchemyError) as exc_info:
            with service.transaction():
                raise error

        assert exc_info.value is error
        mock_db.rollback.assert_called_once()
        mock_db.commit.assert_not_called()

    def test_domain_errors_pass_through(self):
        mock_db = Mock(spec=Session)
        service = BaseService(mock_db)

        with pytest.raises(ValidationException):
            with service.transaction():
                raise ValidationException("bad input")

        mock_db.rollback.assert_called_once()


class TestMeasureOperation:
    def test_records_success_and_failure(self, service):
        assert service.do_work(2) == 4
        with pytest.raises(ValidationException):
            service.do_work(-1)

        metrics = service.get_metrics()["do_work"]
        assert metrics["count"] == 2
        assert metrics["success_count"] == 1
        assert metrics["failure_count"] == 1
        assert metrics["success_rate"] == 0.5

    def test_reports_to_prometheus(self, service):
        with patch("carwash.services.base.prometheus_metrics") as prom:
            service.do_work(1)

        prom.record_service_operation.assert_called_once()
        kwargs = prom.record_service_operation.call_args.kwargs
        assert kwargs["service"] == "MeasuredService"
        assert kwargs["operation"] == "do_work"
        assert kwargs["status"] == "success"

    def test_slow_operations_are_logged(self, service):
        service.logger = Mock()
        with patch("carwash.services.base.time.time", side_effect=[100.0, 102.5]):
            service.do_work(1)

        service.logger.warning.assert_called_once()
        assert "do_work" in service.logger.warning.call_args.args[0]

    def test_reset_metrics(self, service):
        service.do_work(1)
        service.reset_metrics()

        assert service.get_metrics() == {}

    def test_logger_uses_class_name(self, service):
        assert service.logger.name == "MeasuredService"
