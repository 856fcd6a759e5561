import logging

import pytest

import gpreg as gp
import gpreg.num as gnp
from gpreg import config


def test_logger():
    logger = config.get_logger()
    assert logger.name == "gpreg"
    config.set_log_level(logging.DEBUG)
    assert logger.level == logging.DEBUG
    config.set_log_level(logging.WARNING)


def test_model_construction_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="gpreg"):
        gp.GPModel([[0.0], [1.0]], [1.0, 2.0])
    assert any("GPModel fitted" in r.getMessage() for r in caplog.records)


def test_singular_matrix_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="gpreg"):
        with pytest.raises(gp.SingularMatrixError):
            gp.GPModel([[0.0], [0.0]], [1.0, 2.0], variance=1e8)
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_update():
    cfg = config.get_config()
    old = cfg.seed
    cfg.update(seed=99)
    assert cfg.seed == 99
    cfg.update(seed=old)
    with pytest.raises(AttributeError):
        cfg.update(unknown_key=1)


def test_set_seed():
    config.set_seed(5)
    a = gnp.randn(3)
    config.set_seed(5)
    b = gnp.randn(3)
    assert (a == b).all()
    assert config.get_config().seed == 5


def test_version():
    assert isinstance(gp.__version__, str)
    assert "GPRegConfig" in str(config.get_config())
