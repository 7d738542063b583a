"""Static posts served when the WordPress API cannot be reached."""

from wpblog.schemas.blog import BlogPost

_GP_WEBSITE_CONTENT = """\
<p>In May 2023, NHSE released a GP website benchmarking and improvement tool.</p>

<p>The tool has three focuses but the top two are:</p>

<ol class="wp-block-list">
<li>The top tasks that patients want to do on a GP website</li>
<li>The things that patients found most challenging on GP websites</li>
</ol>

<p>At our PCN, we used this tool to benchmark our GP websites, improve them, and create an adjusted benchmarking framework that meets all NHS guidelines.</p>

<h2 class="wp-block-heading">How do our GP websites meet the top tasks that patients want to do on a GP website?</h2>

<p>There are four key patient priorities when they visit a GP website:</p>

<ul class="wp-block-list">
<li>Book appointments,</li>
<li>Repeat prescription information,</li>
<li>Get test results,</li>
<li>Find opening hours and contact information</li>
</ul>

<p>Recent GP website design adopted square boxes for each item.</p>

<p>We followed this best practice; the first two boxes are book appointments and repeat prescription information.</p>

<p>Grouped the test results and repeat prescriptions under the NHS App box.</p>

<p>As the NHS App has become a preferred way of managing test result requests</p>

<p>Information on opening hours and contact-us were grouped as top items on the website menu.</p>

<h2 class="wp-block-heading">Why WordPress is the Most Suited for GP &amp; PCN Websites</h2>

<p>When it comes to IT solutions, numbers matter.</p>

<p>WordPress powers 43% of all websites globally with a large amount of developers contributing to the platform.</p>

<p>This means you can easily find WordPress talent than you would ASP.net</p>

<p>Some suppliers use the Nightingale theme build by NHS Leadership Academy Digital Team</p>

<p>you can use the same.</p>

<p>It makes it easier to deploy an NHS compliant website in minutes</p>"""

_NHS_APP_CONTENT = """\
<p>Our PCN got into 2024 at 55% NHS App uptake.</p>

<p>A fairly good amount, but our ICB wanted 70% by December 2024.</p>

<p>If we increased monthly registration from 140 to 220, we could only reach 70% by December 2025 (one year later).</p>

<h2 class="wp-block-heading"><strong>The Challenge</strong>:</h2>

<p>Covid-19 was the primary reason many people downloaded the NHS App.</p>

<p>GPs were only responsible for issuing online access. This means giving people access to their medical records.</p>

<p>But not how they access this record.</p>

<h2 class="wp-block-heading">What we did to increase the NHS App Uptake</h2>

<ol class="wp-block-list">
<li>Worked with the ICB Digital Access Lead to train our GP admin staff on how to support patients getting on the NHS App</li>
<li>Organised a drop-in session supported by our GP practice managers and colleagues</li>
<li>Established a monthly Digital Caf&eacute;, now Digital Clinic at both practices to support people to download and use the NHS App</li>
</ol>

<h3 class="wp-block-heading">We have now increased our NHS App uptake to a pre-covid record high of 400 monthly registrations</h3>

<ul class="wp-block-list">
<li>Expected to reach 70% 6 months earlier than projected</li>
<li>64% uptake in December 2024</li>
<li>Have knowledgeable GP staff supporting and triaging patients with NHS App issues</li>
<li>Issued proxy access to 5 of 6 eligible care homes in Wantage</li>
</ul>

<h2 class="wp-block-heading">What value does the NHS app present to GP surgeries?</h2>

<p>With most GPs moving from traditional appointments to a triage system, the cost of messaging patients has increased.</p>

<p>With the NHS App being a free service, GPs can save the cost of 2.25p per sms sent and include all required consultation information without feeling they are using too many fragments.</p>"""

_CARE_HOME_CONTENT = """\
<p class="has-text-align-center"><em>Care home proxy access enables care home staff to access residents' GP services on time</em></p>

<p>Every week, a GP from the surgery gets an appointment to visit a resident of a care home who has a medical problem.</p>

<p>Any observation from such a visit is recorded in the resident's patient profile in the GP system.</p>

<p>The Enhanced Health in Care Home (EHCH) framework expects healthcare providers and Care Home staff to communicate better to improve resident care.</p>

<h2 class="wp-block-heading">With proxy access</h2>

<p>The care home staff sees the consultation in the resident's medical note when the GP enters it.</p>

<p>Anyone responsible for their care, like Care Home staff who needs to order cream for a resident, can see what cream they are on and quickly make such a request without phoning the GP.</p>

<h2 class="wp-block-heading">Benefits of proxy access</h2>

<h3 class="wp-block-heading">View consultations:</h3>

<p>Fulfilling the EHCH is easier if GP practices give care homes access to view consultations.</p>

<h2 class="wp-block-heading"><strong>Save one working day with this proxy access hack</strong></h2>

<p>3 in 10 care home staff switch jobs every year.</p>

<p>To save this time, you should limit the number of care home staff who can use proxy access. The max we have done so far is six staff per care home.</p>

<h2 class="wp-block-heading">Deliver care home proxy access in your PCN with this template</h2>

<p>Whether you are a DTL or Practice Manager, this NHS template is all you need</p>"""

FALLBACK_POSTS: tuple[BlogPost, ...] = (
    BlogPost(
        id="49",
        title=(
            "How We Transformed NHS GP Website with WordPress & Nightingale Theme "
            "and How You Can Achieve the Same"
        ),
        slug="gp-website-with-wordpress-nightingale-theme",
        excerpt=(
            "In May 2023, NHSE released a GP website benchmarking and improvement tool. "
            "The tool has three focuses but the top two are: The top tasks that patients "
            "want to do on a GP website and The things that patients found most challenging "
            "on GP websites. At our PCN, we used this tool to benchmark our GP websites, "
            "improve them, and create an adjusted benchmarking framework that meets all NHS "
            "guidelines."
        ),
        content=_GP_WEBSITE_CONTENT,
        author="Faith Nte",
        published_at="2025-01-12T22:06:33",
        updated_at="2025-02-03T20:04:28",
        tags=["nhs", "wordpress", "website"],
        featured=True,
        published=True,
        cover_image=(
            "https://blog.faithnte.com/wp-content/uploads/2025/01/"
            "transformed-gp-website-with-wordpress-cms-and-nightingale-theme.png"
        ),
    ),
    BlogPost(
        id="22",
        title="Achieved 9% Growth in NHS App Uptake in 8 Months",
        slug="9-nhs-app-uptake-in-8-months",
        excerpt=(
            "Our PCN got into 2024 at 55% NHS App uptake. A fairly good amount, but our ICB "
            "wanted 70% by December 2024. If we increased monthly registration from 140 to "
            "220, we could only reach 70% by December 2025 (one year later)."
        ),
        content=_NHS_APP_CONTENT,
        author="Faith Nte",
        published_at="2025-01-01T21:49:13",
        updated_at="2025-02-03T20:04:51",
        tags=["nhs", "digital-transformation"],
        featured=True,
        published=True,
        cover_image="https://blog.faithnte.com/wp-content/uploads/2025/01/nhs-app-uptake-growth.png",
    ),
    BlogPost(
        id="7",
        title=(
            "Care Home Proxy Access: How We Did It – 4 Steps to Achieve the Same "
            "with This NHS Template"
        ),
        slug="care-home-proxy-access",
        excerpt=(
            "Care home proxy access enables care home staff to access residents' GP services "
            "on time. Every week, a GP from the surgery gets an appointment to visit a "
            "resident of a care home who has a medical problem. Any observation from such a "
            "visit is recorded in the resident's patient profile in the GP system."
        ),
        content=_CARE_HOME_CONTENT,
        author="Faith Nte",
        published_at="2024-12-21T12:11:50",
        updated_at="2025-02-03T20:05:15",
        tags=["nhs", "care-homes"],
        featured=True,
        published=True,
        cover_image="https://blog.faithnte.com/wp-content/uploads/2024/12/care-home-proxy-access.png",
    ),
)


def get_fallback_posts() -> list[BlogPost]:
    """Return fresh copies of the fallback posts."""
    return [post.model_copy(deep=True) for post in FALLBACK_POSTS]
