from functools import wraps
import os
from urllib.parse import quote


SETTINGS_KEY = "configured"


def configure(f):
    """
    Force the API to set defaults if no user settings have been provided.
    """

    @wraps(f)
    def wrapper(self, *args, **kwargs):
        if not self.settings.get(SETTINGS_KEY, False):
            self.configure()

        return f(self, *args, **kwargs)

    return wrapper


class Settings:
    """
    Control the management and lifecycle of any redisq API settings.
    """

    settings = {SETTINGS_KEY: False}

    def configure(self, **kwargs):
        """
        Configure the redisq API for settings like the broker URI.

        By doing so, the redisq API allows users to instantiate connectors on
        demand without requiring the user to pass around settings.

        A full `uri` wins over the individual `redis_*` settings, which fall
        back to the REDIS_HOST, REDIS_PORT, REDIS_USERNAME and REDIS_PASSWORD
        environment variables.
        """
        uri = kwargs.pop("uri", None)
        redis_host = kwargs.pop("redis_host", os.getenv("REDIS_HOST", "127.0.0.1"))
        redis_port = int(kwargs.pop("redis_port", os.getenv("REDIS_PORT", "6379")))
        redis_username = kwargs.pop("redis_username", os.getenv("REDIS_USERNAME"))
        redis_password = kwargs.pop("redis_password", os.getenv("REDIS_PASSWORD"))

        if uri is None:
            credentials = ""
            if redis_password:
                credentials = f":{quote(redis_password, safe='')}@"
                if redis_username:
                    credentials = f"{quote(redis_username, safe='')}{credentials}"
            uri = f"redis://{credentials}{redis_host}:{redis_port}"

        # Generic Settings.
        Settings.settings.update(kwargs)
        Settings.settings["uri"] = uri
        Settings.settings[SETTINGS_KEY] = True
