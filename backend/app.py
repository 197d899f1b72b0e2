import os
import logging
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from dotenv import load_dotenv

from data_access.repositories import MAX_LEADERBOARD_ENTRIES
from database_postgres import init_database
from services.leaderboard_service import InvalidSubmission, LeaderboardService

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def get_allowed_origins():
    """
    CORS origins for /api/* from CORS_ALLOWED_ORIGINS (comma-separated).
    Defaults to any origin, since the game can be hosted anywhere.
    """
    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        return [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    return "*"


def create_app(leaderboard_service: Optional[LeaderboardService] = None) -> Flask:
    app = Flask(__name__)
    service = leaderboard_service or LeaderboardService()

    CORS(app, resources={r"/api/*": {"origins": get_allowed_origins()}})

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/leaderboard", methods=["GET"])
    def get_leaderboard():
        """
        Get the top scores.

        Query parameters:
        - limit: number of entries, 1-100 (default: 100)

        Returns scores ordered by score DESC, created_at ASC.
        """
        limit = request.args.get("limit", default=MAX_LEADERBOARD_ENTRIES, type=int)

        try:
            scores = service.get_leaderboard(limit=limit)
            return jsonify({"success": True, "scores": scores})

        except Exception as error:
            logger.error(f"Error fetching leaderboard: {error}")
            return jsonify({"success": False, "error": "Internal server error"}), 500

    @app.route("/api/leaderboard", methods=["POST"])
    def submit_score():
        """
        Submit a score.

        Body: {"username": str, "score": int}
        Returns: {"success": true, "position": int, "rank": str}
        """
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            return jsonify({"success": False, "error": "Invalid request body"}), 400

        try:
            result = service.submit_score(payload.get("username"), payload.get("score"))
            return jsonify({"success": True, **result})

        except InvalidSubmission as error:
            return jsonify({"success": False, "error": str(error)}), 400

        except Exception as error:
            logger.error(f"Error submitting score: {error}")
            return jsonify({"success": False, "error": "Internal server error"}), 500

    @app.route("/api/init-db", methods=["POST"])
    def init_db():
        """Create the leaderboard table and index if they don't exist."""
        try:
            init_database()
            return jsonify({"success": True, "message": "Database initialized successfully"})

        except Exception as error:
            logger.error(f"Database init error: {error}")
            return jsonify({"success": False, "error": str(error)}), 500

    return app


app = create_app()


if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="0.0.0.0", port=port, debug=False)
