"""
Logger utility for tracking simulation runs.
"""

import logging
import os
from datetime import datetime
import json


class Logger:
    """
    Logger for run tracking and console output.
    """

    FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __init__(self, log_dir='logs', experiment_name=None, level=logging.INFO):
        """
        Initialize logger.

        Args:
            log_dir (str): Directory for log files
            experiment_name (str): Name of the run
            level (int): Logging level
        """
        self.log_dir = log_dir
        os.makedirs(log_dir, exist_ok=True)

        if experiment_name is None:
            experiment_name = f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.experiment_name = experiment_name

        self.log_file = os.path.join(log_dir, f"{experiment_name}.log")

        self.logger = logging.getLogger(experiment_name)
        self.logger.setLevel(level)

        # Handlers belong to this instance; another Logger may share the name
        formatter = logging.Formatter(self.FORMAT)
        self.handlers = [logging.FileHandler(self.log_file), logging.StreamHandler()]
        for handler in self.handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.metrics = []

    def info(self, message):
        """Log info message."""
        self.logger.info(message)

    def warning(self, message):
        """Log warning message."""
        self.logger.warning(message)

    def log_metrics(self, step, metrics_dict):
        """
        Log metrics for a step.

        Args:
            step (int): Step number
            metrics_dict (dict): Dictionary of metrics
        """
        metrics_entry = {'step': step, **metrics_dict}
        self.metrics.append(metrics_entry)

        metrics_str = ', '.join([f"{k}: {v:.4f}" if isinstance(v, float) else f"{k}: {v}"
                                for k, v in metrics_dict.items()])
        self.info(f"Step {step} - {metrics_str}")

    def log_step(self, generation, statistics):
        """
        Log the statistics of one generation.

        Args:
            generation (int): Generation reached
            statistics (StepStatistics): Step statistics
        """
        self.log_metrics(generation, statistics.as_dict())

    def save_metrics(self):
        """
        Save metrics to JSON file.

        Returns:
            str: Path of the written file
        """
        metrics_file = os.path.join(self.log_dir, f"{self.experiment_name}_metrics.json")
        with open(metrics_file, 'w') as f:
            json.dump(self.metrics, f, indent=2)
        self.info(f"Metrics saved to {metrics_file}")
        return metrics_file

    def log_config(self, config_dict):
        """
        Log run configuration.

        Args:
            config_dict (dict): Configuration parameters

        Returns:
            str: Path of the written file
        """
        config_file = os.path.join(self.log_dir, f"{self.experiment_name}_config.json")
        with open(config_file, 'w') as f:
            json.dump(config_dict, f, indent=2)
        self.info(f"Configuration saved to {config_file}")
        return config_file

    def close(self):
        """Detach and close the handlers of this run."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
