# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""WSGI entry point for serverless platforms that import ``api/index.py``."""

from transapi.app import create_app

app = create_app()
