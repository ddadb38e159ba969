"""
Basic vttthumbs usage example.

Downloads a thumbnail cue file and prints which sprite tile would be
shown, and where, as the pointer moves along a 640px progress bar.
"""

from vttthumbs import VTTThumbnailParser, compute_offset, fetch_cue_file, style_for_time


def main():
    src = "https://example.com/videos/thumbs.vtt"
    duration = 120.0
    bar_width = 640

    print("Downloading thumbnail cues...")
    content = fetch_cue_file(src)

    parser = VTTThumbnailParser()
    result = parser.parse_content(content, source=src)
    print(f"Parsed {len(result)} cues, skipped {result.skipped_count} blocks")

    for percent in (0.0, 0.25, 0.5, 0.75, 0.99):
        style = style_for_time(result.cues, percent * duration)
        if style is None:
            print(f"{percent:.2f}: no thumbnail")
            continue

        offset = compute_offset(percent, bar_width, style.width_px or 0)
        print(f"{percent:.2f}: {style.background} at {offset}px")


if __name__ == "__main__":
    main()
