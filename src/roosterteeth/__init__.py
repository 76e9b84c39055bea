"""roosterteeth - typed client for the Rooster Teeth VOD API.

Example:
    ```python
    from roosterteeth import RoosterTeethClient

    with RoosterTeethClient() as client:
        episodes = client.list_episodes(1)
        print(episodes[0].attributes.title)
    ```

Note the difference between an ``Episode`` and a ``Video``: an episode
describes the content, while a video carries the playback URLs and is only
returned when the client is entitled to watch it (otherwise
``VideoUnavailable`` is raised).
"""

from roosterteeth._version import __version__
from roosterteeth.api import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    RoosterTeethConnectionError,
    RoosterTeethError,
    SchemaError,
    VideoUnavailable,
)
from roosterteeth.auth import Anonymous, Credential, Login
from roosterteeth.client import RoosterTeethClient
from roosterteeth.models import (
    AccessToken,
    Channel,
    Episode,
    ResultPage,
    Season,
    Series,
    Video,
    decode,
    encode,
)

__all__ = [
    "__version__",
    "RoosterTeethClient",
    "Anonymous",
    "Credential",
    "Login",
    "RoosterTeethError",
    "RoosterTeethConnectionError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "SchemaError",
    "VideoUnavailable",
    "AccessToken",
    "Channel",
    "Episode",
    "ResultPage",
    "Season",
    "Series",
    "Video",
    "decode",
    "encode",
]
