"""Client-side navigation helper injected into ROUTING_ONLY pages.

The helper intercepts same-origin link clicks, fetches the target page and
swaps title, meta tags and body content instead of doing a full reload.
"""

NAVIGATION_OPACITY = 0.7
NAVIGATION_TRANSITION = "0.1s"

_SCRIPT_TEMPLATE = r"""(function(){
  'use strict';

  var cache = {};
  var currentController = null;

  function isInternal(url) {
    try {
      var parsed = new URL(url, window.location.origin);
      return parsed.origin === window.location.origin;
    } catch (e) {
      return false;
    }
  }

  function shouldHandle(anchor) {
    if (!anchor || !anchor.href) return false;
    if (!isInternal(anchor.href)) return false;

    var href = anchor.getAttribute('href');
    if (href && href.startsWith('#')) return false;
    if (anchor.hasAttribute('download')) return false;
    if (anchor.target === '_blank') return false;
    if (anchor.rel && anchor.rel.includes('external')) return false;

    var path = new URL(anchor.href).pathname;
    if (/\.(pdf|zip|png|jpg|jpeg|gif|svg|webp|mp4|mp3|wav)$/i.test(path)) {
      return false;
    }

    return true;
  }

  function navigate(url, pushState) {
    if (currentController) {
      currentController.abort();
    }
    currentController = new AbortController();

    if (cache[url]) {
      updatePage(cache[url], url, pushState);
      return;
    }

    document.body.style.opacity = '__OPACITY__';
    document.body.style.transition = 'opacity __TRANSITION__';

    fetch(url, { signal: currentController.signal })
      .then(function(response) {
        if (!response.ok) throw new Error('HTTP ' + response.status);
        return response.text();
      })
      .then(function(html) {
        cache[url] = html;
        updatePage(html, url, pushState);
      })
      .catch(function(err) {
        if (err.name === 'AbortError') return;
        console.warn('[spa-router] Navigation failed, falling back:', err);
        window.location.href = url;
      })
      .finally(function() {
        document.body.style.opacity = '';
        document.body.style.transition = '';
        currentController = null;
      });
  }

  function updatePage(html, url, pushState) {
    var parser = new DOMParser();
    var doc = parser.parseFromString(html, 'text/html');

    var newTitle = doc.querySelector('title');
    if (newTitle) {
      document.title = newTitle.textContent || '';
    }

    ['description', 'keywords', 'author'].forEach(function(name) {
      var newMeta = doc.querySelector('meta[name="' + name + '"]');
      var oldMeta = document.querySelector('meta[name="' + name + '"]');
      if (newMeta && oldMeta) {
        oldMeta.setAttribute('content', newMeta.getAttribute('content') || '');
      } else if (newMeta && !oldMeta) {
        document.head.appendChild(newMeta.cloneNode(true));
      }
    });

    doc.querySelectorAll('meta[property^="og:"]').forEach(function(newTag) {
      var prop = newTag.getAttribute('property');
      var oldTag = document.querySelector('meta[property="' + prop + '"]');
      if (oldTag) {
        oldTag.setAttribute('content', newTag.getAttribute('content') || '');
      } else {
        document.head.appendChild(newTag.cloneNode(true));
      }
    });

    var newBody = doc.querySelector('body');
    if (newBody) {
      var routerScript = document.body.querySelector('script:last-of-type');
      document.body.innerHTML = newBody.innerHTML;
      if (routerScript) {
        document.body.appendChild(routerScript.cloneNode(true));
      }
    }

    if (pushState) {
      history.pushState({ url: url }, '', url);
    }

    var hash = new URL(url, window.location.origin).hash;
    if (hash) {
      var target = document.querySelector(hash);
      if (target) {
        target.scrollIntoView();
      }
    } else {
      window.scrollTo(0, 0);
    }

    window.dispatchEvent(new CustomEvent('spa-navigation', { detail: { url: url } }));
  }

  function handleClick(event) {
    if (event.ctrlKey || event.metaKey || event.shiftKey || event.altKey) {
      return;
    }

    var anchor = event.target;
    while (anchor && anchor.tagName !== 'A') {
      anchor = anchor.parentElement;
    }

    if (!shouldHandle(anchor)) return;

    event.preventDefault();
    navigate(anchor.href, true);
  }

  function handlePopState(event) {
    if (event.state && event.state.url) {
      navigate(event.state.url, false);
    } else {
      navigate(window.location.href, false);
    }
  }

  document.addEventListener('click', handleClick);
  window.addEventListener('popstate', handlePopState);
  history.replaceState({ url: window.location.href }, '', window.location.href);

  if ('requestIdleCallback' in window) {
    requestIdleCallback(function() {
      var links = document.querySelectorAll('a[href]');
      var observer = new IntersectionObserver(function(entries) {
        entries.forEach(function(entry) {
          if (entry.isIntersecting) {
            var anchor = entry.target;
            if (shouldHandle(anchor) && !cache[anchor.href]) {
              fetch(anchor.href)
                .then(function(r) { return r.text(); })
                .then(function(html) { cache[anchor.href] = html; })
                .catch(function() {});
            }
            observer.unobserve(anchor);
          }
        });
      });
      links.forEach(function(link) {
        if (shouldHandle(link)) observer.observe(link);
      });
    });
  }
})();"""


def get_navigation_helper_script(
    opacity: float = NAVIGATION_OPACITY, transition: str = NAVIGATION_TRANSITION
) -> str:
    """Return the navigation helper source with the loading style filled in."""
    return _SCRIPT_TEMPLATE.replace("__OPACITY__", str(opacity)).replace(
        "__TRANSITION__", transition
    )
