## numerical configuration for polyclip
## Copyright (c) 2026 polyclip contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Tolerances used by the clipping phases.

A ``ClipConfig`` is immutable and is passed explicitly to the clip
routines; there is no global state to mutate.  Values can come from
keyword arguments, from ``POLYCLIP_*`` environment variables, or from a
YAML mapping::

    parallel_epsilon: 1.0e-9
    endpoint_epsilon: 1.0e-9
    probe_fraction: 0.5
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from polyclip.geom import epsilon

ENV_PREFIX = 'POLYCLIP_'


@dataclass(frozen=True)
class ClipConfig:
    parallel_epsilon: float = epsilon
    endpoint_epsilon: float = epsilon
    probe_fraction: float = 0.5

    def __post_init__(self):
        for name in ('parallel_epsilon', 'endpoint_epsilon'):
            value = getattr(self, name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) \
               or not math.isfinite(value) or value < 0.0:
                raise ValueError(f'{name} must be a non-negative number, got {value!r}')
        pf = self.probe_fraction
        if not isinstance(pf, (int, float)) or isinstance(pf, bool) or not 0.0 < pf < 1.0:
            raise ValueError(f'probe_fraction must lie strictly between 0 and 1, got {pf!r}')

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]],
                     base: Optional["ClipConfig"] = None) -> "ClipConfig":
        """Build a config from a mapping; keys that are not fields raise ``ValueError``."""
        base = base or cls()
        if not data:
            return base
        if not isinstance(data, Mapping):
            raise ValueError(f'config must be a mapping, got {type(data).__name__}')
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f'unknown config keys: {unknown}')
        return replace(base, **{k: float(v) for k, v in data.items()})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 base: Optional["ClipConfig"] = None) -> "ClipConfig":
        """Override defaults from ``POLYCLIP_PARALLEL_EPSILON`` and friends."""
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw == '':
                continue
            try:
                values[f.name] = float(raw)
            except ValueError as exc:
                raise ValueError(
                    f'bad value for {ENV_PREFIX + f.name.upper()}: {raw!r}') from exc
        return cls.from_mapping(values, base=base)


DEFAULT_CONFIG = ClipConfig()


def load_config(path: Path | str, *, use_env: bool = False) -> ClipConfig:
    """Read a ``ClipConfig`` from a YAML file, optionally overlaid by the environment."""
    import yaml  # local import to avoid hard dependency if unused

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'config not found: {path}')
    with path.open('r', encoding='utf-8') as fp:
        data = yaml.safe_load(fp) or {}
    config = ClipConfig.from_mapping(data)
    if use_env:
        config = ClipConfig.from_env(base=config)
    return config


__all__ = [
    'ClipConfig',
    'DEFAULT_CONFIG',
    'load_config',
]
