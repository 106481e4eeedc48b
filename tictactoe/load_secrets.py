import os
from dotenv import load_dotenv

load_dotenv()

db_backend = os.getenv("DB_BACKEND", "sqlite")
user = os.getenv("DB_USER")
password = os.getenv("DB_PASSWORD")
host = os.getenv("DB_HOST")
port = os.getenv("DB_PORT")
db_name = os.getenv("DB_NAME")
sqlite_path = os.getenv("SQLITE_PATH")

board_size = os.getenv("GAME_BOARD_SIZE", "3")
win_length = os.getenv("GAME_WIN_LENGTH", "3")
max_board_size = os.getenv("GAME_MAX_BOARD_SIZE", "19")
random_seed = os.getenv("GAME_RANDOM_SEED")
retention_hours = os.getenv("GAME_RETENTION_HOURS", "168")
purge_interval_hours = os.getenv("GAME_PURGE_INTERVAL_HOURS", "24")
log_level = os.getenv("LOG_LEVEL", "INFO")

if __name__ == "__main__":
    print(db_backend, user, host, port, db_name, sqlite_path, board_size, win_length)
