# SPDX-License-Identifier: MIT

import atexit

from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.repository.item import ITEM_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    ITEM_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
