from src.shift_compliance.shift_compliance.main import create_app

app = create_app()


if __name__ == '__main__':
    # Local development server; use a WSGI server (gunicorn, waitress...) in production
    app.run(debug=app.config["DEBUG"])
