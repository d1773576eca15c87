"""Resume text shown by the viewer.

Paragraph text may use inline style tags, e.g. ``{mod=bold;fg=yellow Name:}``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """A titled paragraph."""
    title: str
    text: str


@dataclass(frozen=True)
class Skill:
    """A rated skill, shown as a gauge."""
    name: str
    percent: int

    @property
    def label(self) -> str:
        return f"{self.percent} / 100"


@dataclass(frozen=True)
class SkillGroup:
    """A titled list of skills and the column width it gets."""
    title: str
    items: tuple[str, ...]
    width: int


RESUME_TITLE = "DAISY T'S RESUME"

FLOWER = r"""-----------------------------------------------
                .'`. ,'`.
          .---./    u    \,---.
       ___|    \    |    /    |___
      \    `.   \   |   /   .'    /
       \_    `.  \  |  /  .'    _/
     .-' `-._  `.:::::::.'  _.-' `-.
     \       `-;:::::::::;-'       /
      >~------~:::::::::::~------~<
     /      _.-;:::::::::;-._      \
     `-._.-'   .`.::::::'.   `-._.-'
        /    .'  /  |  \  `.    \
       /___.'   /   |   \   `.___\
           |   /    |    \    |
           `--'\   .n.   /`---'
                `.'   `.'
"""

HOME_TEXT = (
    "\n"
    "Use {mod=bold;fg=yellow ←}  and {mod=bold;fg=yellow →}  to navigate between the sections.\n\n"
    "Type {mod=bold;fg=yellow q} to exit the application.\n\n"
    + FLOWER
)

# About

INFORMATION = Entry(
    "Information",
    "\n"
    "{mod=bold;fg=yellow Name:} Daisy T\n\n"
    "{mod=bold;fg=yellow Nationality:} Canadian\n\n"
    "{mod=bold;fg=yellow Currently based in:} Berlin, Germany\n\n",
)

LANGUAGES = Entry(
    "Languages",
    "\n"
    "{mod=bold;fg=yellow English:} Native\n\n"
    "{mod=bold;fg=yellow French:} Good Knowledge\n\n"
    "{mod=bold;fg=yellow German:} Good Knowledge\n\n"
    "{mod=bold;fg=yellow Cantonese:} Conversational\n\n",
)

CONTACT = Entry(
    "Contact",
    "\n"
    "{mod=bold;fg=yellow Email:} daisyts@gmx.com\n\n"
    "{mod=bold;fg=yellow Phone:} +49 (0) 176 3163 5400\n\n"
    "{mod=bold;fg=yellow Website:} https://infoverload.ca/\n\n"
    "{mod=bold;fg=yellow Twitter:} https://twitter.com/1nfoverload\n\n"
    "{mod=bold;fg=yellow LinkedIn:} http://linkedin.com/in/daisyts\n\n"
    "{mod=bold;fg=yellow GitHub:} https://github.com/infoverload\n\n",
)

ABOUT_ME = Entry(
    "About me",
    "\n"
    "I am a Software Developer, Technical Writer, Developer Advocate,\n"
    "and Open-Source Enthusiast with experience building\n"
    "web applications. \n\n"
    "I am keen on community work and sharing knowledge and have\n"
    "a particular interest in backend and infrastructure projects.\n\n"
    "My non-technical interests include knitting, baking,\n"
    "& learning new natural languages.\n\n",
)

# Skills

PROGRAMMING_LANGUAGES: tuple[Skill, ...] = (
    Skill("Go", 70),
    Skill("JavaScript", 70),
    Skill("PHP", 70),
    Skill("Ruby", 60),
    Skill("Rust (learning)", 40),
    Skill("Python (learning)", 40),
)

OTHER_SKILLS: tuple[SkillGroup, ...] = (
    SkillGroup("Frameworks", ("Symfony", "Laravel", "Rails"), 15),
    SkillGroup(
        "Technologies",
        ("GNU / Linux", "OSX", "MySQL", "AJAX", "jQuery", "OOP", "MVC",
         "Wordpress", "Prometheus", "Docker"),
        24,
    ),
    SkillGroup(
        "Areas",
        ("Web Development", "Databases", "Software Engineering", "Monitoring",
         "Project Management"),
        25,
    ),
    SkillGroup("Version Control", ("Git", "Mercurial", "SVN"), 15),
    SkillGroup("Task Tracking", ("JIRA", "AutoTask", "Trello", "Asana"), 16),
)

# Experience

EXPERIENCE: tuple[Entry, ...] = (
    Entry(
        "2018 - current: Freelancer, Self-Employed (remote)",
        "\nPerform ongoing consultative and development work ranging from website "
        "maintenance/upgrades to business strategy and development.\n\n",
    ),
    Entry(
        "2017 - current: Contributor, Fixate IO (remote)",
        "\nGenerate in-depth technical content on an ongoing basis; Conduct market "
        "research and perform industry analysis;\n\n"
        "Cover wide range of topics relating to software development, memory handling, etc.\n\n"
        "Took over two projects to refactor, maintain and add new features.\n\n",
    ),
    Entry(
        "2017 - 2017: Software Developer, Project A Services GmbH (Germany)",
        "\nSupported the backend development team by assisting them on various venture "
        "projects using Symfony and PHP; Collaborated \n\n"
        "with Product Managers to foster and implement Agile practices; Analyzed an "
        "existing prototype application, refactored it\n\n"
        "and added features, following the company's best practices and software "
        "development principles\n\n",
    ),
    Entry(
        "2014 - 2015: Web Developer, eKomi Ltd (Germany)",
        "\nSupported IT team with both frontend and backend development and debugging "
        "tasks while working with large codebase;\n\n"
        "Performed both client-facing work (designing customized, responsive review "
        "pages for clients) and internal tooling\n\n"
        "for the rest of the team\n\n",
    ),
    Entry(
        "2011 - 2012: Software Developer, GrantStream Inc (Canada)",
        "\nResponsible for a variety of development projects in grant management "
        "software including maintenance of PHP applications\n\n"
        "and MS SQL Server and MySQL databases; Configured UI of customized Web "
        "applications with PHP, MSSQL, JavaScript, jQuery, CSS\n\n",
    ),
)

# Education

EDUCATION: tuple[Entry, ...] = (
    Entry(
        "University of Toronto: Certificate in Project Management (2010 - 2011)",
        "\nStudied foundations of project management and how to apply the most "
        "effective tools & techniques to achieve project objectives\n\n",
    ),
    Entry(
        "University of Western Ontario: Bachelor of Arts (2004 - 2009)",
        "\nObtained Double Major in Computer Science and Media Studies\n\n",
    ),
    Entry(
        "Stendhal University: Exchange Program (2008)",
        "\nParticipated in Academic Exchange Program in Grenoble through the "
        "University of Western Ontario\n\n",
    ),
)

CONTINUING_EDUCATION: tuple[Entry, ...] = (
    Entry(
        "Getting Started with Continuous Delivery (2018)",
        "\nO'Reilly Live Online Training Course",
    ),
    Entry(
        "Practical Kubernetes (2018)",
        "\nO'Reilly Live Online Training Course",
    ),
    Entry(
        "Bill Kennedy's Ultimate Go Workshop (2018)",
        "\nA weekend course designed to provide an intensive idiomatic view of Go",
    ),
    Entry(
        "Women Techmakers - JavaScript Crash Course (2017-2018)",
        "\nA 12-week lecture course designed to expose participants to multiple levels "
        "of the software development stack\n"
        "with introductions to Node.js, Vue.js, MongoDB, Unit Testing, CI/CD, Design "
        "Patterns, Bridging APIs, and more",
    ),
)

# Projects

PERSONAL_PROJECTS: tuple[Entry, ...] = (
    Entry(
        "Observability in the Kitchen",
        "\nThis project leverages sensors, open-source software, and Go to improve "
        "breadmaking and explores the relationship between\n"
        "sourdough cultures, humidity, and temperature and how one can use systems "
        "monitoring tools to gain insight into an age-old tradition.\n\n",
    ),
    Entry(
        "Wortschatz Logger",
        "\nWeb application aimed at helping people familiarize themselves with German "
        "articles through personal user accounts that allows\n"
        "word tracking/categorizing and interactive quizzes. Built with PHP Laravel "
        "Framework, PostgreSQL, JavaScript, jQuery, SASS.\n\n",
    ),
    Entry(
        "Der Die Das Game",
        "\nHTML5 browser game built with the Phaser.io framework and fully programmed "
        "in JavaScript. \n\n",
    ),
)

VOLUNTEER_WORK = Entry(
    "Rails Girls Berlin (2017 - current)",
    "\nVolunteer as a coach for the Rails Girls Berlin Community, an organization "
    "aimed at mentoring and encouraging women\n"
    "with no programming experience to learn the full programming stack and gain "
    "practical experience by building their\n"
    "own Ruby on Rails app in a safe and welcoming space",
)

OPEN_SOURCE = Entry(
    "Prometheus (2017 - current)",
    "\nOngoing contributions to a systems monitoring toolkit written in Go: add new "
    "default metric go_info to Go client library;\n"
    "document config options; add new features to command line utility; create "
    "custom node exporter for BME280 module; ...",
)

# Objective

OBJECTIVE = Entry(
    "What I am looking for?",
    "\n{mod=bold;fg=yellow I am always open to be part of a team that does interesting work. :)}\n\n\n"
    "My ideal role involves a combination of the following:\n\n"
    "\t* Solve interesting backend and infrastructure problems\n"
    "\t* Create and improve the tools used during the development\n"
    "\t* Maintain a highly performant and reliable system\n"
    "\t* Create and integrate APIs to expose and extend functionality\n"
    "\t* Documentation\n"
    "\t* Contribute to open source software\n"
    "\t* Opportunities to attend and speak at conferences\n"
    "\t* Maintain healthy work-life balance\n"
    "\t* Receive and give mentorship",
)
