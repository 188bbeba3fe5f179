"""
Core numeric kernel: scalar precision policy, math utilities,
vector/matrix value types, 2D geometry and integrators.

Библиотека не настраивает logging: подключается только NullHandler.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
