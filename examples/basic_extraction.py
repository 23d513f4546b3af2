#!/usr/bin/env python3
"""
Basic extraction example
Queries an inline HTML snippet with predicates and chained finds
"""

import sys
import os

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from foliage import Attr, Class, Document, LogManager, Name, ParseConfig

HTML = """
<html><body>
  <ul id="menu">
    <li class="item active"><a href="/home">Home</a></li>
    <li class="item"><a href="/docs">Docs</a></li>
  </ul>
  <div class="post"><h2>First post</h2><span class="tag">python</span></div>
  <div class="post"><h2>Second post</h2><span class="tag">html</span><span class="tag">bs4</span></div>
  <a href="https://example.com">Elsewhere</a>
</body></html>
"""


def main():
    """Basic extraction example"""
    log_manager = LogManager(log_level="INFO")

    document = Document.from_html(HTML, ParseConfig(skip_whitespace_text=True))
    print(f"🌿 Parsed {document.stats().total_nodes} nodes")

    menu_links = document.find(Attr("id", "menu")).find(Name("a"))
    print("\nMenu links:")
    for link in menu_links:
        print(f"  {link.text()} -> {link.attr('href')}")

    active = document.find(Class("item") & Class("active")).find(Name("a")).first()
    print(f"\nActive item: {active.text() if active else '-'}")

    print("\nPosts:")
    for post in document.find(Class("post")):
        title = post.find(Name("h2")).text()
        tags = post.find(Class("tag")).texts()
        print(f"  {title}: {', '.join(tags)}")

    log_manager.log_query_event("summary", menu_links=len(menu_links))
    print("\n✅ Extraction completed!")


if __name__ == "__main__":
    main()
