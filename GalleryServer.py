#!/usr/bin/env python3
# coding: utf-8
"""
只读图片画廊（Thai Card Store）
- 首页：daily / weekly 两个标签页，daily 按子文件夹浏览。
- /daily/<folder>：htmx 局部刷新用的图片片段。
- /view?src=...：单图页面，带同组其他图片和社交分享预览信息。
"""

import argparse
import logging
import os
from urllib.parse import quote

from flask import Flask, request, render_template, send_from_directory
from jinja2 import TemplateError

from gallery_config import CONTENT_DIR, DAILY_DIR, GalleryConfig, load_config
from gallery_context import assemble_index, build_image_context
from gallery_errors import GalleryError, RenderFailure
from gallery_scan import check_folder, list_images

log = logging.getLogger(__name__)

HERE = os.path.dirname(os.path.abspath(__file__))


def render(tmpl: str, **ctx) -> str:
    try:
        return render_template(tmpl, **ctx)
    except TemplateError as e:
        log.exception("rendering %s failed", tmpl)
        raise RenderFailure(f"render failed: {e}") from e


def request_uri() -> str:
    """Path and query of the current request as the client sent it."""
    raw = request.environ.get("REQUEST_URI") or request.environ.get("RAW_URI")
    if raw:
        return raw
    uri = quote(request.script_root + request.path)
    qs = request.query_string.decode("latin-1")
    return f"{uri}?{qs}" if qs else uri


def create_app(config: GalleryConfig | None = None) -> Flask:
    config = config or load_config()
    app = Flask(
        __name__,
        static_folder=os.path.join(HERE, "static"),
        template_folder=os.path.join(HERE, "templates"),
    )
    app.config["GALLERY"] = config
    content_root = config.path(CONTENT_DIR)

    @app.errorhandler(GalleryError)
    def gallery_error(e: GalleryError):
        return str(e), e.status, {"Content-Type": "text/plain; charset=utf-8"}

    # ------------------ 路由 ------------------
    @app.route("/")
    def gallery():
        tab = request.args.get("tab", "")
        folder = request.args.get("folder", "")
        if folder:
            check_folder(folder)
        data = assemble_index(config, tab, folder)
        return render("index.html", page=data)

    @app.route("/daily/", defaults={"folder": ""})
    @app.route("/daily/<path:folder>")
    def daily_folder(folder):
        """Image grid for one daily folder, loaded by htmx."""
        check_folder(folder)
        imgs = list_images(config.base_dir, f"{DAILY_DIR}/{folder}")
        body = render("_folder_images.html", images=imgs)
        return body, 200, {"HX-Trigger": "folderLoaded"}

    @app.route("/view")
    def view_image():
        data = build_image_context(
            config,
            request.args.get("src", ""),
            request.scheme,
            request.host,
            request_uri(),
        )
        return render("image.html", img=data)

    @app.route(f"/{CONTENT_DIR}/<path:filename>")
    def image_file(filename):
        return send_from_directory(content_root, filename)

    return app


def main(argv=None):
    ap = argparse.ArgumentParser(description="Read-only daily/weekly image gallery")
    ap.add_argument("--root", help="directory that contains images/")
    ap.add_argument("--host")
    ap.add_argument("--port", type=int)
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    config = load_config(base_dir=args.root, host=args.host, port=args.port)
    app = create_app(config)
    log.info("serving %s on http://%s:%d", config.path(CONTENT_DIR), config.host, config.port)
    app.run(config.host, config.port, debug=config.debug, threaded=True)


if __name__ == "__main__":
    main()
