# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import logging
from os import getenv, getpid
from flask import has_request_context, request

class MultiLineFormatter(logging.Formatter):
    """Logging formatter that repeats the record prefix on every line of a message.

    Tracebacks and multi-line messages (rendered markdown, YAML errors) would otherwise
    run into the left margin and become impossible to grep by worker or logger name.
    """
    def format(self, record):
        message = super().format(record)
        original = record.getMessage()
        if "\n" not in original:
            return message

        first_line = message.split("\n", 1)[0]
        first_message_line = original.split("\n", 1)[0]
        prefix = first_line[:len(first_line) - len(first_message_line)]

        lines = message.split("\n")
        return "\n".join([lines[0]] + [prefix + line for line in lines[1:]])

class GunicornWorkerFilter(logging.Filter):
    """Filter to add the Gunicorn worker ID to log records."""

    def filter(self, record):
        worker_id = getenv("GUNICORN_WORKER_ID", "unknown")

        if worker_id != "unknown":
            record.worker_id = "worker" + worker_id
        else:
            record.worker_id = f"PID {getpid()}"
        return True

class NoDockerHealthcheckFilter(logging.Filter):
    """Filter to exclude automated health check requests from the request log."""

    def filter(self, record):
        if not has_request_context():
            return True
        if request.args.get("reason", None) == "DockerAutomatedHealthcheck" and "health" in request.path:
            return False
        return True
