# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Runtime type detection for utilkit.

This package includes:
- Kind, the closed classification of runtime values
- type_of / is_type for kind inspection
- Symbol, a unique labelled token type
"""

from .kinds import Kind, type_of, is_type
from .symbol import Symbol

__all__ = [
    'Kind',
    'type_of',
    'is_type',
    'Symbol',
]
