from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from cas.host.base import HtmlHost
from cas.host.lxml_host import LxmlHost
from cas.specificity import SpecificityMode


@dataclass(frozen=True)
class CompilerConfig:
    specificity: SpecificityMode = SpecificityMode.LEGACY
    host_factory: Callable[[], HtmlHost] = field(default=LxmlHost)
