from pathlib import Path
import os
from dotenv import load_dotenv

env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

API_SECRET_KEY = os.getenv('API_SECRET_KEY')
if not API_SECRET_KEY:
    raise ValueError("API_SECRET_KEY is not set")

DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite+aiosqlite:///./movie_catalog.db')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOGS_DIR = os.getenv('LOGS_DIR', 'logs')
