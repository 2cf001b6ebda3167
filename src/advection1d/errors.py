# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Exception types raised by advection1d."""


class AdvectionError(Exception):
    """Base class for advection1d errors."""


class InvalidDomainError(AdvectionError, ValueError):
    """Non-positive cell count, negative ghost count, or a ≥ b."""


class InvalidTimestepError(AdvectionError, ValueError):
    """Non-positive step size or a final time that cannot be reached."""
