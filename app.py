"""Development entry point: ``python app.py`` (APP_ENV selects the settings)."""

from src.gym_attendance.gym_attendance.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=bool(app.config.get("DEBUG", False)))
