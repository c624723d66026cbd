"""HTML templates for the marketing pages.

Templates use str.format() with named placeholders. LAYOUT wraps every
page; the body templates fill its ``{main}`` slot. All values are
escaped by the renderer before they reach a template.
"""

from __future__ import annotations

# ── Shared layout ─────────────────────────────────────────────────

LAYOUT = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <meta name="description" content="{description}">
  <meta name="robots" content="{robots}">
  <link rel="stylesheet" href="/assets/site.css">
</head>
<body class="page-{page_key}">
  <header class="site-header">
    <a href="/" class="brand">{brand_name}</a>
    <button class="nav-toggle" aria-expanded="false" aria-controls="main-nav">Menu</button>
    <nav class="main-nav" id="main-nav" aria-label="Main">
      <ul class="nav-list">
{nav_html}
      </ul>
    </nav>
  </header>
  <main>
{main}
  </main>
  <footer class="site-footer">
    <div class="footer-brand">
      <h3>{brand_name}</h3>
      <p>Located in {location}</p>
      <p><a href="mailto:{contact_email_attr}">{contact_email}</a></p>
    </div>
    <p class="footer-notice"><strong>Notice:</strong> We do not support spam or illicit email practices. We only work with legitimate senders.</p>
    <p class="footer-copyright">&copy; {year} {brand_name}. All rights reserved.</p>
  </footer>
  <script src="/assets/site.js" defer></script>
</body>
</html>
"""

NAV_ITEM = '        <li><a href="{href}"{current}>{label}</a></li>'

# ── Page bodies ───────────────────────────────────────────────────

HOME_BODY = """\
    <section class="hero">
      <h1>{hero_headline}</h1>
      <p class="hero-subtitle">{hero_subheadline}</p>
      <a href="{cta_href}" class="btn btn-primary cta-primary">{cta_label}</a>
    </section>
    <div class="home-sections">
{sections_html}
    </div>
    <section class="home-faq">
      <h2>{faq_headline}</h2>
      <div class="home-faq-list">
{faq_html}
      </div>
    </section>"""

PAGE_BODY = """\
    <h1 class="page-headline">{headline}</h1>
    <div class="{container_class}">
{content_html}
    </div>"""

PRICING_BODY = """\
    <h1 class="page-headline">{headline}</h1>
    <div class="pricing-tiers">
{tiers_html}
    </div>
    <div class="fine-print">
{fine_print_html}
    </div>"""

CONTACT_BODY = """\
    <h1 class="page-headline">{headline}</h1>
    <div class="contact-intro">
{intro_html}
    </div>
    <div class="contact-info">
{blocks_html}
    </div>
    <a href="{payment_href}" class="btn btn-primary cta-primary">Get Started</a>"""

CONFIRMATION_BODY = """\
    <h1 class="page-headline">Payment received</h1>
    <p>Thank you. Your 48-hour setup window starts once we have your details.</p>
    <div id="reference-info" class="reference-info"{reference_hidden} data-max-length="{reference_max_length}" data-keys="{reference_keys}">
      <p id="reference-text">{reference_text}</p>
    </div>
    <p id="client-email-notice" class="client-email-notice"{email_hidden} data-max-length="{email_max_length}">{email_text}</p>
    <a id="intake-form-cta" href="{intake_href}" class="btn btn-primary btn-lg">Complete the intake form</a>
    <ol class="next-steps">
      <li>Fill in the intake form with your domain and DNS provider.</li>
      <li>We configure SPF, DKIM and DMARC and verify the results.</li>
      <li>You receive a verification report with the objective checks.</li>
    </ol>
    <a id="intake-form-cta-bottom" href="{intake_href}" class="btn btn-primary">Complete the intake form</a>
    <p>Questions? Email <a id="support-email-link" href="mailto:{support_email_attr}">{support_email}</a>.</p>"""

# ── Fragments ─────────────────────────────────────────────────────

CONTENT_SECTION = """\
      <div class="content-section">
        <h2>{title}</h2>
{body_html}
      </div>"""

LEGAL_SECTION = """\
      <section>
        <h2>{title}</h2>
{body_html}
      </section>"""

FAQ_ITEM = """\
        <details class="faq-item" id="{item_id}">
          <summary class="faq-question">
            <span>{question}</span>
            <span class="faq-icon" aria-hidden="true">+</span>
          </summary>
          <div class="faq-answer">
            <p>{answer}</p>
          </div>
        </details>"""

PRICING_CARD = """\
      <div class="pricing-card">
        <h3>{name}</h3>
        <div class="pricing-price">{price}</div>
        <p class="pricing-who">{who}</p>
        <ul class="pricing-features">
{includes_html}
        </ul>
        <div class="pricing-cta">
          <a href="{cta_href}" class="btn btn-primary btn-lg">{cta_label}</a>
          <p class="stripe-note text-muted">Charged securely via Stripe. Your card details never touch this site.</p>
        </div>
      </div>"""

CONTACT_BLOCK = """\
      <div class="contact-block">
        <span class="contact-block-label">{label}</span>
        <span class="contact-block-value">{value_html}</span>
      </div>"""

NOT_PROVIDED = "<em>Not provided</em>"
