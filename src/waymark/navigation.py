"""The application's route registry.

Every navigable page of the site, declared once as static data and
built into a ``RouteTable`` at startup. Labels are ``navigation.*`` (or
``about.*``) translation keys with English fallbacks; icons are lucide
icon names passed through to the templates.

Literal routes come before dynamic routes they overlap with:
``/exhibition/global``, ``/exhibition/gallery`` and
``/exhibition/constellation`` must win over ``/exhibition/{exhibitid}``,
and ``/exhibition/gallery/grid`` over ``/exhibition/gallery/{exhibitid}``.
"""

from functools import cache

from waymark.config import TrailConfig
from waymark.routing.route import RouteNode
from waymark.routing.table import RouteTable
from waymark.trail import Breadcrumbs

ROUTES: tuple[RouteNode, ...] = (
    RouteNode("/", "navigation.home", "Home", icon="home", name="home"),
    # Exhibition
    RouteNode(
        "/exhibition",
        "navigation.exhibits",
        "Exhibits",
        icon="layout-grid",
        name="exhibition",
        link=False,
    ),
    # Breadcrumb-only node: no page of its own, links back to /exhibition
    RouteNode(
        "/exhibition/permanent",
        "navigation.permanentCollection",
        "Permanent Collection",
        parent="/exhibition",
        name="exhibitionPermanent",
        href="/exhibition",
    ),
    RouteNode(
        "/exhibition/gallery/grid",
        "navigation.grid",
        "Grid",
        icon="grid",
        parent="/exhibition/permanent",
        name="exhibitionGallery",
    ),
    RouteNode(
        "/exhibition/gallery/path",
        "navigation.constellation",
        "Constellation",
        icon="sparkle",
        parent="/exhibition/permanent",
        name="exhibitionConstellation",
    ),
    RouteNode(
        "/exhibition/global",
        "navigation.map",
        "Map",
        icon="globe",
        parent="/exhibition/permanent",
        name="exhibitionGlobal",
    ),
    RouteNode(
        "/exhibition/gallery",
        "navigation.grid",
        "Grid",
        icon="grid",
        parent="/exhibition",
        name="exhibitionGrid",
    ),
    RouteNode(
        "/exhibition/constellation",
        "navigation.constellation",
        "Constellation",
        icon="sparkle",
        parent="/exhibition",
        name="exhibitionConstellationView",
    ),
    RouteNode(
        "/exhibition/{exhibitid}",
        "navigation.exhibit",
        "Exhibit",
        parent="/exhibition",
        name="exhibit",
    ),
    RouteNode(
        "/exhibition/gallery/{exhibitid}",
        "navigation.exhibit",
        "Exhibit",
        parent="/exhibition/gallery",
        name="exhibitGrid",
    ),
    RouteNode(
        "/exhibition/gallery/grid/{exhibitid}",
        "navigation.exhibit",
        "Exhibit",
        parent="/exhibition/gallery/grid",
        name="exhibitGallery",
    ),
    RouteNode(
        "/exhibition/gallery/path/{exhibitid}",
        "navigation.exhibit",
        "Exhibit",
        parent="/exhibition/gallery/path",
        name="exhibitConstellation",
    ),
    # Prompts
    RouteNode(
        "/prompt", "navigation.prompts", "Prompts", icon="sparkles", name="prompt", link=False
    ),
    RouteNode("/prompt/play", "navigation.play", "Play", parent="/prompt", name="promptPlay"),
    RouteNode(
        "/prompt/history", "navigation.history", "History", parent="/prompt", name="promptHistory"
    ),
    RouteNode(
        "/prompt/this-week",
        "navigation.thisWeek",
        "This Week",
        parent="/prompt",
        name="promptThisWeek",
    ),
    # Admin
    RouteNode("/admin", "navigation.admin", "Admin", icon="lock", name="admin", link=False),
    RouteNode(
        "/admin/prompts", "navigation.prompts", "Prompts", parent="/admin", name="adminPrompts"
    ),
    RouteNode("/admin/users", "navigation.users", "Users", parent="/admin", name="adminUsers"),
    RouteNode(
        "/admin/exhibits", "navigation.exhibits", "Exhibits", parent="/admin", name="adminExhibits"
    ),
    RouteNode(
        "/admin/exhibits/new",
        "navigation.new",
        "New",
        parent="/admin/exhibits",
        name="adminExhibitsNew",
    ),
    RouteNode(
        "/admin/exhibits/{exhibitid}/edit",
        "navigation.edit",
        "Edit",
        parent="/admin/exhibits",
        name="adminExhibitsEdit",
    ),
    RouteNode(
        "/admin/exhibits/{exhibitid}/content",
        "navigation.content",
        "Content",
        parent="/admin/exhibits",
        name="adminExhibitsContent",
    ),
    RouteNode(
        "/admin/notifications",
        "navigation.notifications",
        "Notifications",
        parent="/admin",
        name="adminNotifications",
    ),
    RouteNode(
        "/admin/settings",
        "navigation.siteSettings",
        "Site Settings",
        icon="settings",
        parent="/admin",
        name="adminSettings",
    ),
    # Creators, profiles and portfolios
    RouteNode("/creators", "navigation.creators", "Creators", icon="users", name="creators"),
    RouteNode(
        "/creators/{creatorid}",
        "navigation.profile",
        "Profile",
        icon="user",
        name="profile",
        link=False,
    ),
    RouteNode(
        "/creators/{creatorid}/edit",
        "navigation.edit",
        "Edit",
        parent="/creators/{creatorid}",
        name="profileEdit",
    ),
    RouteNode(
        "/creators/{creatorid}/portfolio",
        "navigation.portfolio",
        "Portfolio",
        icon="briefcase",
        name="portfolio",
        link=False,
    ),
    RouteNode(
        "/creators/{creatorid}/portfolio/edit",
        "navigation.edit",
        "Edit",
        parent="/creators/{creatorid}/portfolio",
        name="portfolioEdit",
    ),
    RouteNode(
        "/creators/{creatorid}/collections",
        "navigation.collections",
        "Collections",
        parent="/creators/{creatorid}/portfolio",
        name="collections",
    ),
    RouteNode(
        "/creators/{creatorid}/collections/{collectionid}/edit",
        "navigation.edit",
        "Edit",
        parent="/creators/{creatorid}/collections",
        name="collectionEdit",
    ),
    RouteNode(
        "/creators/{creatorid}/s/{submissionid}",
        "navigation.submission",
        "Submission",
        parent="/creators/{creatorid}/portfolio",
        name="submission",
    ),
    RouteNode(
        "/creators/{creatorid}/s/{submissionid}/edit",
        "navigation.edit",
        "Edit",
        parent="/creators/{creatorid}/s/{submissionid}",
        name="submissionEdit",
    ),
    RouteNode(
        "/creators/{creatorid}/s/{submissionid}/edit/image",
        "navigation.imageEditor",
        "Image Editor",
        parent="/creators/{creatorid}/s/{submissionid}/edit",
        name="submissionImageEditor",
    ),
    RouteNode(
        "/creators/{creatorid}/s/{submissionid}/critiques",
        "navigation.critiques",
        "Critiques",
        parent="/creators/{creatorid}/s/{submissionid}",
        name="submissionCritiques",
    ),
    # Share links
    RouteNode("/s/{code}", "navigation.share", "Share", name="shortUrl", link=False),
    # Other pages
    RouteNode("/favorites", "navigation.favorites", "Favorites", icon="heart", name="favorites"),
    RouteNode(
        "/collections",
        "collections.myCollections",
        "My Collections",
        name="myCollections",
    ),
    RouteNode("/about", "navigation.about", "About", icon="info", name="about", link=False),
    RouteNode(
        "/about/purpose", "about.purpose.title", "Purpose", parent="/about", name="aboutPurpose"
    ),
    RouteNode(
        "/about/features", "navigation.features", "Features", parent="/about", name="aboutFeatures"
    ),
    RouteNode(
        "/about/portfolios-and-sharing",
        "about.organization.title",
        "Portfolios and Sharing",
        parent="/about",
        name="aboutPortfoliosAndSharing",
    ),
    RouteNode(
        "/about/prompt-submissions",
        "about.promptInspiration.title",
        "Prompt Submissions",
        parent="/about",
        name="aboutPromptSubmissions",
    ),
    RouteNode("/about/badges", "about.badges.title", "Badges", parent="/about", name="aboutBadges"),
    RouteNode(
        "/about/protecting-your-work",
        "about.protectingYourWork.title",
        "Protecting Your Work",
        parent="/about",
        name="aboutProtectingYourWork",
    ),
    RouteNode(
        "/about/critiques",
        "navigation.critiques",
        "Critiques",
        parent="/about",
        name="aboutCritiques",
    ),
    RouteNode(
        "/about/profile", "aboutProfile.title", "Profile", parent="/about", name="aboutProfile"
    ),
    RouteNode(
        "/about/changelog",
        "navigation.changelog",
        "Changelog",
        parent="/about",
        name="aboutChangelog",
    ),
    RouteNode("/about/terms", "navigation.terms", "Terms", parent="/about", name="terms"),
    RouteNode("/contact", "navigation.contact", "Contact", icon="mail", name="contact"),
    RouteNode("/logout", "navigation.logout", "Log Out", icon="log-out", name="logout"),
)

# No breadcrumbs on the home page or the sign-in flow
SITE_CONFIG = TrailConfig(hidden_paths=("/",), hidden_prefixes=("/auth",))


@cache
def default_table() -> RouteTable:
    """Build the site's route table. Built once per process and shared."""
    return RouteTable(ROUTES)


def default_breadcrumbs() -> Breadcrumbs:
    """Breadcrumb engine over ``default_table()`` with the site configuration."""
    return Breadcrumbs(default_table(), SITE_CONFIG)
