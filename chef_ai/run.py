import os
from chef_ai import create_app
from chef_ai.config.settings import config

# Create the Flask application
app = create_app(config[os.getenv("CHEF_AI_ENV", "default")])

if __name__ == "__main__":
    port = int(os.getenv("PORT", "5000"))
    app.run(host="127.0.0.1", port=port, debug=app.config.get("DEBUG", False), threaded=True)
