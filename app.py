"""Development entry point: ``python app.py`` or ``flask --app app run``."""

from siswa_admin.main import create_app

app = create_app()


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=app.config["PORT"], debug=app.config["DEBUG"])
