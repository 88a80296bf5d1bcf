"""
Build image server request URLs and output file names from pids.
"""

from .config import Settings

IMAGE_EXTENSION = '.jpg'


def safe_name(pid: str) -> str:
    # pids use a colon as namespace separator, e.g. "bdr:123"
    return pid.replace(':', '_', 1)


def image_filename(pid: str) -> str:
    return safe_name(pid) + IMAGE_EXTENSION


def build_image_url(settings: Settings, pid: str) -> str:
    """Return <scheme>://<server>/<prefix>/<pid>/<region>/<size>/<rotation>/<quality>.<format>.

    The pid is inserted as is, without URL encoding.
    """
    return (
        settings.scheme + "://" + settings.server + "/" + settings.prefix + "/"
        + pid + "/" + settings.region + "/" + settings.size + "/" + settings.rotation
        + "/" + settings.quality + "." + settings.format
    )
