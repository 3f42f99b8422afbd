# Copyright (c) 2024 Hiring Assistant API Contributors
# SPDX-License-Identifier: MIT

"""Services layer for upstream access.

The OpenAI adapter is the only module that talks to the SDK client.
"""

from .openai_adapter import AsyncOpenAIAdapter, create_openai_client

__all__ = ['AsyncOpenAIAdapter', 'create_openai_client']
