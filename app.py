"""WSGI entry point.

Usage:
    flask --app app run
    gunicorn -w 4 -b 0.0.0.0:5000 app:app
"""
from student_attendance import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
