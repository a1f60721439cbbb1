# tests/test_logger.py

import json
import logging

import numpy as np

from sqrtdecomp.utils.logger import Logger, get_logger, save_metrics, setup_logger


def test_logger(tmp_path):
    """Test basic metrics logger functionality"""
    logger = Logger(tmp_path / "logs")

    step_data = {
        'n': 100,
        'block_size': 10,
        'repeat': 0,
        'seconds': np.float64(0.5)
    }
    logger.log_step(step_data)
    logger.log_step(dict(step_data, repeat=1))

    summary = logger.log_run("n100_b10", {'n': 100, 'block_size': 10, 'blocked_seconds': 0.5})
    logger.log_run("n100_b20", {'n': 100, 'block_size': 20, 'blocked_seconds': 0.25})

    assert summary['run_id'] == "n100_b10"
    assert logger.metrics_file.exists()
    assert logger.runs_file.exists()

    lines = logger.metrics_file.read_text().splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])['seconds'] == 0.5

    all_metrics = logger.get_metrics()
    assert all_metrics['run_id'] == ["n100_b10", "n100_b20"]
    assert all_metrics['block_size'] == [10, 20]

    with open(logger.runs_file) as f:
        assert len(json.load(f)) == 2


def test_get_metrics_fills_missing_keys(tmp_path):
    logger = Logger(tmp_path)
    logger.log_run(1, {'a': 1})
    logger.log_run(2, {'b': 2})
    assert logger.get_metrics() == {'run_id': [1, 2], 'a': [1, None], 'b': [None, 2]}


def test_get_logger_adds_single_handler():
    logger = get_logger("sqrtdecomp.tests.single", level=logging.DEBUG)
    logger = get_logger("sqrtdecomp.tests.single", level=logging.DEBUG)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "nested" / "run.log"
    logger = setup_logger("sqrtdecomp.tests.file", log_file)
    setup_logger("sqrtdecomp.tests.file", log_file)
    logger.info("hello")

    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    file_handlers[0].flush()
    assert "hello" in log_file.read_text()

    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()


def test_save_metrics_converts_numpy(tmp_path):
    path = tmp_path / "out" / "metrics.json"
    save_metrics({'seconds': np.array([0.5, 0.25]), 'n': np.int64(7), 'tag': 'x'}, path)
    with open(path) as f:
        assert json.load(f) == {'seconds': [0.5, 0.25], 'n': 7, 'tag': 'x'}
