import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Persistence
    books_file: str = os.getenv("LIBRARY_BOOKS_FILE", "books.json")
    members_file: str = os.getenv("LIBRARY_MEMBERS_FILE", "members.json")

    # Transaction log (plain text, append only)
    log_file: str = os.getenv("LIBRARY_LOG_FILE", "transactions.log")

    # Application
    app_name: str = os.getenv("APP_NAME", "City Library Digital Management System")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()


settings = Settings()
