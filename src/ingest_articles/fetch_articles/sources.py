RSS_FEED_CATEGORIES = {
    "News & Current Affairs": {
        "BBC News - Top Stories": "https://feeds.bbci.co.uk/news/rss.xml",
        "CNN - Top Stories": "http://rss.cnn.com/rss/edition.rss",
        "Reuters - World News": "http://feeds.reuters.com/Reuters/worldNews",
        "The Guardian - World": "https://www.theguardian.com/world/rss",
        "Al Jazeera": "https://www.aljazeera.com/xml/rss/all.xml",
        "Associated Press": "https://apnews.com/rss",
        "NPR News": "https://feeds.npr.org/1001/rss.xml",
        "DW News": "https://rss.dw.com/rdf/rss-en-all",
        "Politico": "https://www.politico.com/rss/politics08.xml",
        "NY Times - Home Page": "https://rss.nytimes.com/services/xml/rss/nyt/HomePage.xml",
    },
    "Technology & Startups": {
        "TechCrunch": "http://feeds.feedburner.com/TechCrunch/",
        "Wired": "https://www.wired.com/feed/rss",
        "The Verge": "https://www.theverge.com/rss/index.xml",
        "Ars Technica": "http://feeds.arstechnica.com/arstechnica/index/",
        "Mashable": "http://feeds.mashable.com/Mashable",
        "Hacker News (Top)": "https://news.ycombinator.com/rss",
        "Product Hunt - Today's Picks": "https://www.producthunt.com/feed",
        "Engadget": "https://www.engadget.com/rss.xml",
        "VentureBeat": "https://venturebeat.com/feed/",
        "Gizmodo": "https://gizmodo.com/rss",
    },
    "Business & Finance": {
        "Bloomberg": "https://www.bloomberg.com/feed/podcast/etf-report.xml",
        "Forbes": "https://www.forbes.com/business/feed/",
        "CNBC": "https://www.cnbc.com/id/100003114/device/rss/rss.html",
        "Financial Times": "https://www.ft.com/?format=rss",
        "The Economist": "https://www.economist.com/latest/rss.xml",
        "Harvard Business Review": "https://hbr.org/feed",
        "MarketWatch": "https://www.marketwatch.com/rss/topstories",
        "WSJ - Business": "https://feeds.a.dj.com/rss/RSSMarketsMain.xml",
        "Business Insider": "https://www.businessinsider.com/rss",
        "Investopedia": "https://www.investopedia.com/feedbuilder/feed/getfeed/?feedName=rss_articles",
    },
    "Sports": {
        "ESPN": "https://www.espn.com/espn/rss/news",
        "BBC Sport": "https://feeds.bbci.co.uk/sport/rss.xml",
        "Sky Sports": "https://www.skysports.com/rss/12040",
        "Sports Illustrated": "https://www.si.com/rss/si_topstories.rss",
        "Formula 1": "https://www.formula1.com/rss/news/headlines.rss",
        "NBA": "https://www.nba.com/rss/nba_rss.xml",
        "NFL": "https://www.nfl.com/rss/rsslanding?searchString=home",
        "The Athletic": "https://theathletic.com/feed/",
        "FIFA": "https://www.fifa.com/rss-feeds/",
        "Eurosport": "https://www.eurosport.com/rss.xml",
    },
    "Entertainment & Pop Culture": {
        "Variety": "https://variety.com/feed/",
        "Rolling Stone": "https://www.rollingstone.com/music/music-news/feed/",
        "Billboard": "https://www.billboard.com/feed/",
        "IMDB News": "https://www.imdb.com/news/feed",
        "E! Online": "https://www.eonline.com/syndication/feeds/rssfeeds/topstories",
        "MTV News": "http://www.mtv.com/news/rss/",
        "Pitchfork": "https://pitchfork.com/rss/reviews/albums/",
        "Deadline": "https://deadline.com/feed/",
        "Hollywood Reporter": "https://www.hollywoodreporter.com/t/feed/",
        "Entertainment Weekly": "https://ew.com/feed/",
    },
    "Health & Wellness": {
        "WHO - News": "https://www.who.int/feeds/entity/mediacentre/news/en/rss.xml",
        "Healthline": "https://www.healthline.com/rss",
        "Medical News Today": "https://www.medicalnewstoday.com/rss",
        "WebMD": "https://rssfeeds.webmd.com/rss/rss.aspx?RSSSource=RSS_PUBLIC",
        "Harvard Health Blog": "https://www.health.harvard.edu/blog/feed",
        "Mayo Clinic": "https://newsnetwork.mayoclinic.org/feed/",
        "NHS News": "https://www.england.nhs.uk/feed/",
        "Psychology Today": "https://www.psychologytoday.com/us/rss",
        "Everyday Health": "https://www.everydayhealth.com/rss/all.aspx",
        "Medscape": "https://www.medscape.com/rss/siteupdates.xml",
    },
    "Travel & Lifestyle": {
        "Lonely Planet": "https://www.lonelyplanet.com/blog.rss",
        "Conde Nast Traveler": "https://www.cntraveler.com/feed/rss",
        "Travel + Leisure": "https://www.travelandleisure.com/rss",
        "Nomadic Matt": "https://www.nomadicmatt.com/feed/",
        "The Points Guy": "https://thepointsguy.com/feed/",
        "Culture Trip": "https://theculturetrip.com/feed/",
        "Luxury Travel Magazine": "https://www.luxurytravelmagazine.com/rss",
        "Smarter Travel": "https://www.smartertravel.com/rss/",
        "Adventure Journal": "https://www.adventure-journal.com/feed/",
        "National Geographic Travel": "https://www.nationalgeographic.com/content/nationalgeographic/en_us/travel/rss",
    },
    "Science & Education": {
        "NASA Breaking News": "https://www.nasa.gov/rss/dyn/breaking_news.rss",
        "Nature": "https://www.nature.com/nature.rss",
        "Scientific American": "https://www.scientificamerican.com/feed/",
        "Smithsonian Magazine": "https://www.smithsonianmag.com/rss/",
        "TED Talks Daily": "https://feeds.feedburner.com/tedtalks_video",
        "Science Magazine": "https://www.sciencemag.org/rss/current.xml",
        "Live Science": "https://www.livescience.com/feeds/all",
        "Popular Science": "https://www.popsci.com/arcio/rss/",
        "The Conversation": "https://theconversation.com/us/articles.atom",
        "National Geographic": "https://www.nationalgeographic.com/content/nationalgeographic/en_us/rss",
    },
    "WordPress & Web Development": {
        "WordPress.org Blog": "https://wordpress.org/news/feed/",
        "Smashing Magazine": "https://www.smashingmagazine.com/feed/",
        "CSS-Tricks": "https://css-tricks.com/feed/",
        "SitePoint": "https://www.sitepoint.com/feed/",
        "WP Mayor": "https://wpmayor.com/feed/",
    },
}
