import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration read from the environment."""

    # Defaults file for the interactive prompts
    CONFIG_FILE = os.environ.get('HOLEMILL_CONFIG', 'holemill.cfg')

    # Toolpath preview image resolution
    PREVIEW_DPI = int(os.environ.get('HOLEMILL_PREVIEW_DPI', 150))
