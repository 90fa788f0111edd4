"""
score_db.py: Best-score persistence for the driver.

The engine only keeps the best score for the life of the process; this
store carries it across restarts.
"""

import sqlite3

from .constants import DB_FILE, DEFAULT_PROFILE


class ScoreStore:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS BestScore (
                profile TEXT PRIMARY KEY,
                best INTEGER NOT NULL DEFAULT 0
            )
        """)
        self.conn.commit()

    def get_best(self, profile: str = DEFAULT_PROFILE) -> int:
        """Best score stored for a profile, 0 if there is none yet."""
        self.cur.execute("SELECT best FROM BestScore WHERE profile=?", (profile,))
        row = self.cur.fetchone()
        return row[0] if row else 0

    def update_best(self, score: int, profile: str = DEFAULT_PROFILE) -> int:
        """Keeps the larger of the stored best and `score`; returns the stored value."""
        try:
            self.cur.execute(
                "INSERT INTO BestScore (profile, best) VALUES (?, ?)", (profile, score))
        except sqlite3.IntegrityError:
            self.cur.execute(
                "UPDATE BestScore SET best = MAX(best, ?) WHERE profile=?", (score, profile))
        self.conn.commit()
        return self.get_best(profile)

    def close(self):
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
