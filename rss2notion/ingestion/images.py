"""Lead image extraction from feed item HTML."""

import logging
from typing import Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def get_image_url(html: Optional[str]) -> Optional[str]:
    """
    Return the src of the first <img> in the given HTML.

    Only absolute http(s) URLs are returned. A relative or otherwise
    unusable src is logged and dropped, since Notion rejects it as a cover.
    """
    if not html:
        return None

    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img", src=True)
    if img is None:
        return None

    src = img["src"].strip()
    if not src.startswith("http"):
        logger.warning("Discarding image with non-absolute src: %s", src)
        return None
    return src
