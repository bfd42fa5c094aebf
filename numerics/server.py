from flask import Flask

from . import config
from .api import numerics_bp

app = Flask(__name__)
app.register_blueprint(numerics_bp)


def main():
    app.run(config.HOST, config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
