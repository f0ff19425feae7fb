import os

from storeadmin import create_app

app = create_app()


if __name__ == '__main__':
    port = int(os.getenv("PORT", "5000"))
    app.run(debug=app.config.get('FLASK_ENV') == 'development', host='0.0.0.0', port=port)
