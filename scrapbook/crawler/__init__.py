"""
Crawl core of Scrapbook: discovery, fetch/extract worker pool, match stores.

Import concrete classes from their modules (``scrapbook.crawler.session`` etc.).
"""
