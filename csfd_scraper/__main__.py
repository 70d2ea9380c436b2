"""python -m csfd_scraper"""

from .plugin_main import main

if __name__ == '__main__':
    main()
