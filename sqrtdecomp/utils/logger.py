# sqrtdecomp/utils/logger.py

import json
import logging
from pathlib import Path

import numpy as np

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name, level=logging.INFO):
    """
    Initializes and returns a logger with the specified name and level.

    Args:
        name (str): The name of the logger.
        level (int, optional): The logging level. Defaults to logging.INFO.

    Returns:
        logging.Logger: Configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)

    return logger


def setup_logger(name, log_file=None, level=logging.INFO):
    """
    Create a logger with optional file output

    Args:
        name (str): Name of the logger
        log_file (str, optional): Path to log file
        level (logging level, optional): Logging level

    Returns:
        logging.Logger: Configured logger
    """
    logger = get_logger(name, level)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # Avoid attaching the same file twice on repeated setup
        for handler in logger.handlers:
            if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_file.absolute():
                return logger

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def _to_serializable(value):
    """Convert numpy scalars and arrays to plain Python values"""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {k: _to_serializable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_serializable(v) for v in value]
    return value


def save_metrics(metrics, file_path):
    """
    Save benchmark metrics to a JSON file

    Args:
        metrics (dict): Dictionary of benchmark metrics
        file_path (str): Path to save metrics
    """
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w') as f:
        json.dump(_to_serializable(metrics), f, indent=4)


class Logger:
    """Records per-step measurements and per-run summaries of a benchmark"""

    def __init__(self, log_dir):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.metrics_file = self.log_dir / 'metrics.jsonl'
        self.runs_file = self.log_dir / 'runs.json'
        self.runs = []

    def log_step(self, step_data):
        """Append one measurement as a JSON line"""
        with open(self.metrics_file, 'a') as f:
            f.write(json.dumps(_to_serializable(step_data)) + '\n')

    def log_run(self, run_id, run_data):
        """
        Record the summary of one benchmark run

        Args:
            run_id: Identifier of the run
            run_data (dict): Summary values of the run

        Returns:
            dict: The stored summary, including run_id
        """
        summary = {'run_id': run_id}
        summary.update(_to_serializable(run_data))
        self.runs.append(summary)

        with open(self.runs_file, 'w') as f:
            json.dump(self.runs, f, indent=4)

        return summary

    def get_metrics(self):
        """Run summaries as a dict of column lists"""
        columns = {}
        for run in self.runs:
            for key in run:
                columns.setdefault(key, [])
        for run in self.runs:
            for key, values in columns.items():
                values.append(run.get(key))
        return columns
