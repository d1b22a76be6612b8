import os

__app_name__ = "LanWake"
__package_name__ = "lanwake"

with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
    __version__ = version_file.read().strip()

__description__ = "A small tool that sends Wake-on-LAN magic packets to power on devices over the network."
__author__ = "Septimiu Ujica"
__author_email__ = "hellp@septi.ro"
__author_url__ = "https://www.septi.ro"
__license__ = "GPLv3"
