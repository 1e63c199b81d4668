from dotenv import load_dotenv

from src.overtime_tracker.overtime_tracker.main import create_app

load_dotenv(override=False)

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG", False)))
