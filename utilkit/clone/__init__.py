# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Deep cloning for utilkit.

This package includes:
- deep_clone, a structure-preserving deep copy with cycle handling
- IdentityMap, the identity-keyed visited map it uses
"""

from .clone import deep_clone
from .identity import IdentityMap

__all__ = [
    'deep_clone',
    'IdentityMap',
]
