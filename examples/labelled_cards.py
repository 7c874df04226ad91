"""Example scene: three captioned cards spread evenly across a banner."""

import logging

from geolayout import Canvas, Group, Rect, SvgSurface, Text, align, fill, fix


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    surface = SvgSurface()
    canvas = Canvas(surface, 0, 0, 760, 220)

    background = Rect(fill="#f4f4f4")
    title = Text(surface, "Quarterly overview", font_size=24, font_weight="bold")
    cards = [Rect(width=w, height=120, fill="#ffffff", stroke="#333333") for w in (200, 260, 200)]
    captions = [Text(surface, label, font_size=14) for label in ("Revenue", "Active users", "Churn")]

    row = Group(cards).fix_all("width").fix_all("height").distribute("center_x").space_horizontally(30)
    canvas.append(background, title, row, *captions)

    canvas.constrain(
        fill(canvas, background),
        fix(title.font_size),
        align(title.left_edge, canvas.left_edge, 20),
        align(title.top_edge, canvas.top_edge, 20),
        row,
        align(row.left_edge, canvas.left_edge, 20),
        align(row.right_edge, canvas.right_edge, -20),
        [align(card.top_edge, title.bottom_edge, 20) for card in cards],
        [fix(caption.font_size) for caption in captions],
        [align(caption.center_x, card.center_x) for caption, card in zip(captions, cards)],
        [align(caption.center_y, card.center_y) for caption, card in zip(captions, cards)],
    )
    canvas.render()
    print(canvas.to_string())


if __name__ == "__main__":
    main()
