from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from quicknews import NewsConfig, start_feed
from quicknews.channels import ChannelClosed
from quicknews.providers.base import ProviderFactory


def create_app(config: Optional[NewsConfig] = None, provider_factory: Optional[ProviderFactory] = None) -> Flask:
    config = config or NewsConfig.from_env()
    app = Flask(__name__)
    feed, worker = start_feed(config, provider_factory=provider_factory)
    app.extensions["quicknews.feed"] = feed
    app.extensions["quicknews.worker"] = worker

    @app.get("/health")
    def healthcheck():
        return {"status": "ok", "worker": worker.state.value}

    @app.get("/news")
    def news():
        feed.preload_articles()
        return jsonify(feed.to_dict())

    @app.post("/key")
    def set_key():
        payload = request.get_json(silent=True) or {}
        api_key = payload.get("api_key")
        if not isinstance(api_key, str):
            return jsonify({"error": "`api_key` is required"}), 400
        try:
            feed.set_api_key(api_key)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        except ChannelClosed as exc:
            return jsonify({"error": str(exc)}), 503
        except Exception as exc:  # pragma: no cover - runtime guard
            app.logger.exception("Uncaught exception when handling /key")
            return jsonify({"error": "Unexpected server error", "detail": str(exc)}), 500
        return jsonify({"api_key_init": feed.api_key_init}), 202

    @app.post("/refresh")
    def refresh():
        if not feed.api_key_init:
            return jsonify({"error": "Set an API key first"}), 409
        try:
            feed.refresh()
        except ChannelClosed as exc:
            return jsonify({"error": str(exc)}), 503
        return jsonify({"status": "queued"}), 202

    @app.post("/theme")
    def toggle_theme():
        return jsonify({"dark_mode": feed.toggle_dark_mode()})

    return app


if __name__ == "__main__":
    _config = NewsConfig.from_env()
    logging.basicConfig(level=_config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app(_config).run(debug=False, host="0.0.0.0", port=8008)
