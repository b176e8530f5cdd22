"""
Video info lookup - running time of YouTube links for program durations
"""

import logging
import math
import re
from typing import Optional

import requests

logger = logging.getLogger(__name__)

LENGTH_SECONDS_PATTERN = re.compile(r'"lengthSeconds":"(\d+)"')


def is_youtube_url(url) -> bool:
    return bool(url) and ("youtube.com" in url or "youtu.be" in url)


def duration_minutes(length_seconds: Optional[int]) -> Optional[int]:
    """Whole minutes needed to air a video of length_seconds"""
    if length_seconds is None:
        return None
    return math.ceil(length_seconds / 60)


class VideoInfoService:
    """Service for reading video metadata from a watch page"""

    def __init__(self, timeout=10, user_agent="Mozilla/5.0 (X11; Linux x86_64)"):
        self.timeout = timeout
        self.user_agent = user_agent

    def get_length_seconds(self, url) -> Optional[int]:
        """
        Running time of a YouTube video in seconds

        Returns None for non-YouTube URLs, unreachable pages and pages
        without a length marker.
        """
        if not is_youtube_url(url):
            return None

        headers = {"User-Agent": self.user_agent, "Accept-Language": "en-US,en;q=0.9"}

        logger.debug(f"Fetching video info from {url}")

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning(f"Could not fetch video info for {url}: {e}")
            return None

        match = LENGTH_SECONDS_PATTERN.search(response.text)
        if not match:
            logger.info(f"No length found in page for {url}")
            return None

        return int(match.group(1))
