import io
import logging
import re
from typing import Any

import yaml

from ..core.ports import FrontmatterCodec

log = logging.getLogger(__name__)

_FM = re.compile(r"^\s*---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)", re.DOTALL)


class YamlFrontmatter(FrontmatterCodec):
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        m = _FM.match(text)
        if not m:
            return {}, text
        try:
            fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        except yaml.YAMLError as e:
            log.warning("ignoring invalid frontmatter: %s", e)
            return {}, text
        if not isinstance(fm, dict):
            return {}, text
        body = text[m.end() :]
        return (fm, body)
