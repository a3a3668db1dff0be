"""
Static content for the site.

One canonical record per page: the About biography with its social links,
and the Tools list (which used to be duplicated as a "Uses" page).
Display order is list order.
"""

from __future__ import annotations

from .models import (
    AboutContent,
    BioParagraph,
    IconKind,
    PageMeta,
    SiteContent,
    SocialLink,
    ToolEntry,
    ToolGroup,
    ToolsContent,
)

OWNER = "Mahmoud Abbas"

# ---------------------------------------------------------------------------
# About
# ---------------------------------------------------------------------------

BIO = (
    BioParagraph(
        "As far back as I can remember, I've been a maker. My journey with "
        "computers began at the tender age of 6, when I got my first PC."
    ),
    BioParagraph(
        "At first, I only knew how to play games, but as time went on, my "
        "curiosity grew, and I delved deeper into the inner workings of "
        "computers. I learned how all the pieces fit together, built my own "
        "computer, and even got introduced to programming by my older brother. "
        "Since then, my passion for technology has only grown stronger, and "
        "I've been on an exciting journey of discovery and innovation ever since."
    ),
    BioParagraph(
        "From humble beginnings of creating a simple login page that wasn't "
        "even functional, I was over the moon with my first taste of web "
        "development. As I continued to learn and grow, I stumbled across "
        "Microverse, where I honed my skills in full-stack web development, "
        "fueling my passion for creating cutting-edge web applications."
    ),
    BioParagraph(
        "Apart from my love for coding, I also have a deep passion for "
        "traveling. Exploring new cultures, embarking on great adventures, and "
        "experiencing the wonders of the world bring me immense joy. In fact, "
        "I have a goal to travel the world before I turn 30, seeking "
        "inspiration from diverse experiences and enriching my worldview."
    ),
    BioParagraph(
        "Throughout my career, I've had the opportunity to create innovative "
        "products that have delighted users and made a real impact. From my "
        "humble beginnings to where I am today, I'm constantly driven to push "
        "the boundaries of what's possible and leave a lasting mark in the "
        "world of web development."
    ),
    BioParagraph(
        "At Enzyme, I had a blast developing the frontend web application for "
        "the Enzyme web3 dashboard using Next.js and TypeScript. I created a "
        "web3 multi-chain dashboard that made smart contract creation a "
        "breeze, even for non-coders! I also built a script that could embed "
        "the dashboard functionalities into external websites, taking the "
        "application's reach to new heights."
    ),
    BioParagraph("And that's not all!"),
    BioParagraph(
        "I also designed and developed a website builder that used GPT-3 to "
        "generate fully-functional websites from user descriptions. Talk about "
        "cutting-edge!"
    ),
    BioParagraph("But that's not where the fun ends."),
    BioParagraph(
        "At Quickmail, I took the landing page to the next level by adding "
        "exciting new features that improved user experience and gave the "
        "website a fresh new look. I also geeked out on optimizing the "
        "codebase, automating the build process, and implementing best "
        "practices to boost the website's SEO, accessibility, and overall "
        "performance."
    ),
    BioParagraph("The result? A whopping 15% decrease in bounce rate!"),
    BioParagraph(
        "With my love for frontend development, my eagerness for learning new "
        "technologies related to backend development, and knack for creating "
        "user-friendly experiences, I'm always up for new challenges and ready "
        "to bring my creativity to any project."
    ),
    BioParagraph(
        "I'm currently looking for a new opportunity as a frontend engineer or "
        "a FE-heavy fullstack engineer, so if you have a project that you "
        "think I'd be a good fit for, don't hesitate to reach out!"
    ),
    BioParagraph(
        "Let's collaborate and make something awesome together!",
        emphasis=True,
    ),
)

SOCIAL_LINKS = (
    SocialLink("Follow on Twitter", "https://twitter.com/mahmoud26369406", IconKind.TWITTER),
    SocialLink("Follow on GitHub", "https://github.com/mahmoud717", IconKind.GITHUB),
    SocialLink("Follow on LinkedIn", "https://linkedin.com/in/mahmoud-m-abbas", IconKind.LINKEDIN),
    SocialLink(
        "mahmoudmohammad717@gmail.com",
        "mailto:mahmoudmohammad717@gmail.com",
        IconKind.MAIL,
        separated=True,
    ),
)

ABOUT = AboutContent(
    meta=PageMeta(
        title=f"About - {OWNER}",
        description="I’m Mahmoud Abbas. I live in Alexandria, and I love to travel.",
    ),
    name=OWNER,
    headline="I live in Alexandria, and I love to travel.",
    portrait_alt="",
    bio=BIO,
    social_links=SOCIAL_LINKS,
)

# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------

TOOL_GROUPS = (
    ToolGroup(
        "Workstation",
        (
            ToolEntry(
                "16” ASUS Zyphrus m16 (2022)",
                "State of the art laptop that packs a very powerful gear while "
                "being ultra portable.",
            ),
            ToolEntry("LG UltraGear 27” monitor", "Great color gamut and good looking image."),
            ToolEntry(
                "Logitech g613 rgb keyboard",
                "Not the best out there but it gets the job done.",
            ),
            ToolEntry(
                "Logitech g502 gaming mouse",
                "The OG of gaming mice, and it has a really nice grip to it.",
            ),
        ),
    ),
    ToolGroup(
        "Development tools",
        (
            ToolEntry("Visual studio code", "Best IDE to get hte job done. period."),
            ToolEntry(
                "WSL2",
                "The integrated linux shell allows me to get the best of both "
                "worlds. Great development environment from linux and the "
                "versatility of windows.",
            ),
            ToolEntry(
                "Docker",
                "I use Docker to run my development environment. It’s a great "
                "way to keep your dev environment consistent across machines "
                "when you are on a team especially if you are using windows.",
            ),
            ToolEntry(
                "oh-my-zsh",
                "I’m honestly not even sure what features I get with this that "
                "aren’t just part of the normal Terminal but it’s what I use.",
            ),
            ToolEntry(
                "Github Copilot",
                "It’s been a huge help in my day to day work. Avoiding the need "
                "to google things is a huge time saver.",
            ),
        ),
    ),
    ToolGroup(
        "Documentation tools",
        (
            ToolEntry(
                "Notion",
                "We use Notion for everything. It’s my wiki, my todo list, my "
                "kanban board and everything in between.",
            ),
            ToolEntry(
                "Postman docs",
                "We use Postman docs to document our APIs. It’s a great tool "
                "for documenting APIs and it’s free.",
            ),
        ),
    ),
    ToolGroup(
        "Design",
        (
            ToolEntry(
                "Figma",
                "We started using Figma as just a design tool but now it’s "
                "become our virtual whiteboard for the entire company. Never "
                "would have expected the collaboration features to be the real "
                "hook.",
            ),
        ),
    ),
)

TOOLS = ToolsContent(
    meta=PageMeta(
        title=f"Tools - {OWNER}",
        description="Software I use, gadgets I love, and other things I recommend.",
    ),
    heading="Software I use, gadgets I love, and other things I recommend.",
    intro=(
        "I get asked a lot about the things I use to build software, stay "
        "productive, or buy to fool myself into thinking I’m being productive "
        "when I’m really just procrastinating. Here’s a big list of all of my "
        "favorite stuff."
    ),
    groups=TOOL_GROUPS,
)

SITE_CONTENT = SiteContent(owner=OWNER, about=ABOUT, tools=TOOLS)
