"""
どこで: リポジトリ直下 `main.py`。
何を: 矢印シーンの線幅を 2 → 20 へ補間し、最終フレームを SVG テキストとして標準出力へ書く。
なぜ: 動作確認用の最小エントリポイントとして利用するため。
"""

import logging

from vecshape.api import build_scene
from vecshape.core.shapes.arrow import Arrow
from vecshape.core.transition import animate
from vecshape.export.svg import svg_document


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    frames = list(animate(Arrow(inset_amount=2.0), 20.0, duration=1.0, fps=30.0))
    logging.getLogger(__name__).info("frames: %d", len(frames))
    _t, last = frames[-1]
    print(svg_document(build_scene("arrow", inset_amount=last.inset_amount)), end="")


if __name__ == "__main__":
    main()
