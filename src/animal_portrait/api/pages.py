"""HTML pages rendered in the browser from the JSON API."""

_STYLE = """
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: #f5f7ff; color: #1f2937; }
      header { background: #fff; padding: 1.5rem 2rem; text-align: center; }
      main { max-width: 720px; margin: 2rem auto; background: #fff;
             padding: 2rem; border-radius: 1rem; }
      .steps { display: flex; justify-content: center; gap: 1rem; margin: 1rem 0; }
      .steps span { padding: 0.3rem 0.7rem; border-radius: 999px; background: #e5e7eb; }
      .steps .active { background: #2563eb; color: #fff; }
      .steps .completed { background: #dbeafe; color: #2563eb; }
      label { display: block; margin-top: 1rem; }
      input { padding: 0.5rem 0.7rem; width: 100%; box-sizing: border-box; }
      button { padding: 0.5rem 1rem; margin: 0.5rem 0.5rem 0 0; cursor: pointer; }
      button.selected { outline: 2px solid #2563eb; background: #eff6ff; }
      .grid { display: grid; grid-template-columns: repeat(3, 1fr); gap: 0.5rem; }
      .drop { border: 2px dashed #9ca3af; padding: 2rem; text-align: center; }
      .drop.dragging { border-color: #2563eb; background: #eff6ff; }
      .error { color: #b91c1c; margin-top: 1rem; }
      .bar { height: 12px; background: #e5e7eb; border-radius: 6px; }
      .bar div { height: 12px; background: #2563eb; border-radius: 6px; }
      img { max-width: 100%; border-radius: 0.5rem; }
    </style>
"""

WIZARD_PAGE_HTML = (
    """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Animal Portrait Studio</title>"""
    + _STYLE
    + """  </head>
  <body>
    <header>
      <h1>Animal Portrait Studio</h1>
      <p>Create photos with your favorite animals</p>
      <div id="steps" class="steps"></div>
    </header>
    <main id="view">Loading...</main>
    <script>
      let poller = null;

      async function call(path, options) {
        const res = await fetch(path, Object.assign({ credentials: 'same-origin' }, options));
        const data = await res.json();
        if (data.step) render(data);
        else if (!res.ok) showError(data.detail);
        return data;
      }

      function post(path, body) {
        const options = { method: 'POST' };
        if (body !== undefined) {
          options.headers = { 'Content-Type': 'application/json' };
          options.body = JSON.stringify(body);
        }
        return call(path, options);
      }

      function showError(message) {
        const box = document.getElementById('error');
        if (box) box.textContent = message || '';
      }

      function uploadFile(file) {
        if (!file) return;
        const form = new FormData();
        form.append('file', file);
        call('/wizard/upload', { method: 'POST', body: form });
      }

      function render(state) {
        document.getElementById('steps').innerHTML = state.progress.map(
          (entry) => `<span class="${entry.status}">${entry.label}</span>`
        ).join('');
        const view = state.view;
        const main = document.getElementById('view');
        clearInterval(poller);
        poller = null;
        if (state.step === 'sign-up') {
          main.innerHTML = `
            <h2>Welcome</h2>
            <p>Sign up to create your photo with your favorite animal</p>
            <form id="signup">
              <label>Full Name<input id="fullName" required placeholder="John Doe" /></label>
              <label>Email Address<input id="email" type="email" required placeholder="you@example.com" /></label>
              <button type="submit">Get Started</button>
            </form>`;
          document.getElementById('fullName').value = view.full_name;
          document.getElementById('email').value = view.email;
          document.getElementById('signup').onsubmit = (event) => {
            event.preventDefault();
            event.submitter.disabled = true;
            event.submitter.textContent = 'Signing up...';
            post('/wizard/sign-up', {
              full_name: document.getElementById('fullName').value,
              email: document.getElementById('email').value,
            });
          };
        } else if (state.step === 'upload') {
          main.innerHTML = `
            <h2>Upload Your Photo</h2>
            <p>Welcome, ${view.full_name}! Upload a photo of yourself</p>
            <div id="drop" class="drop">${view.photo_url
              ? `<img src="${view.photo_url}" alt="Preview" />`
              : 'Drag and drop your photo here<br/>Supported formats: JPG, PNG, WEBP (Max 10MB)'}</div>
            <input id="file" type="file" accept="image/*" hidden />
            <button onclick="post('/wizard/back')">Back</button>
            <button id="continue" onclick="post('/wizard/upload/continue')">Continue</button>`;
          document.getElementById('continue').disabled = !view.can_continue;
          const drop = document.getElementById('drop');
          const input = document.getElementById('file');
          drop.onclick = () => input.click();
          drop.ondragover = (event) => { event.preventDefault(); drop.classList.add('dragging'); };
          drop.ondragleave = () => drop.classList.remove('dragging');
          drop.ondrop = (event) => {
            event.preventDefault();
            drop.classList.remove('dragging');
            uploadFile(event.dataTransfer.files[0]);
          };
          input.onchange = () => uploadFile(input.files[0]);
        } else if (state.step === 'choose-animal') {
          main.innerHTML = `
            <h2>Choose Your Animal</h2>
            <div class="grid">${view.animals.map((animal) => `
              <button class="${animal.id === view.selected ? 'selected' : ''}"
                      onclick="post('/wizard/animal', { animal: '${animal.id}' })">
                ${animal.emoji} ${animal.name}<br/><small>${animal.description}</small>
              </button>`).join('')}</div>
            <button onclick="post('/wizard/back')">Back</button>
            <button id="continue" onclick="post('/wizard/animal/continue')">Continue</button>`;
          document.getElementById('continue').disabled = !view.can_continue;
        } else if (state.step === 'generate') {
          main.innerHTML = `
            <h2>${view.status === 'GENERATING' ? 'Creating Your Photo' : 'Photo Generated'}</h2>
            <div class="bar"><div style="width: ${view.progress}%"></div></div>
            <p>${view.progress}%</p>
            <p>${view.message}</p>
            ${view.can_retry ? '<button onclick="post(\\'/wizard/generate/retry\\')">Try again</button>' : ''}
            <button onclick="post('/wizard/back')">Back</button>`;
          if (!view.can_retry) {
            poller = setInterval(() => call('/wizard/state'), 300);
          }
        } else if (view.purchase_complete) {
          main.innerHTML = `
            <h2>Thank You!</h2>
            <p>Your photo has been sent to <strong>${view.email}</strong></p>
            <img src="${view.generated_image_url}" alt="Your photo" />
            <a href="/wizard/download"><button>Download Your Photo</button></a>
            <button onclick="post('/wizard/start-over')">Create Another Photo</button>`;
        } else {
          main.innerHTML = `
            <h2>Choose Your Package</h2>
            <img src="${view.generated_image_url}" alt="Your photo" />
            <div class="grid">${view.tiers.map((tier) => `
              <button class="${tier.id === view.selected_tier ? 'selected' : ''}"
                      onclick="post('/wizard/tier', { tier: '${tier.id}' })">
                ${tier.popular ? '<strong>POPULAR</strong><br/>' : ''}
                ${tier.emoji} ${tier.name}<br/>$${tier.price.toFixed(2)}
                <ul>${tier.features.map((feature) => `<li>${feature}</li>`).join('')}</ul>
              </button>`).join('')}</div>
            <button id="purchase">${view.purchase_label}</button>`;
          document.getElementById('purchase').onclick = (event) => {
            event.target.disabled = true;
            event.target.textContent = 'Processing...';
            post('/wizard/purchase');
          };
        }
        main.insertAdjacentHTML('beforeend', '<div id="error" class="error"></div>');
        showError(state.detail || view.error);
      }

      call('/wizard/state');
    </script>
  </body>
</html>
"""
)


def _lead_page(title: str, subtitle: str, path: str, fields: str, payload: str) -> str:
    return (
        f"""<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>{title}</title>"""
        + _STYLE
        + f"""  </head>
  <body>
    <main>
      <div id="form-view">
        <h1>{title}</h1>
        <p>{subtitle}</p>
        <form id="lead">
          {fields}
          <button type="submit">Join</button>
        </form>
        <div id="error" class="error"></div>
      </div>
      <div id="thanks-view" hidden>
        <h1>Thank you!</h1>
        <p>You're on the list. We'll be in touch soon.</p>
      </div>
    </main>
    <script>
      document.getElementById('lead').onsubmit = async (event) => {{
        event.preventDefault();
        const value = (id) => document.getElementById(id).value;
        const res = await fetch('{path}', {{
          method: 'POST',
          headers: {{ 'Content-Type': 'application/json' }},
          body: JSON.stringify({payload}),
        }});
        if (res.ok) {{
          document.getElementById('form-view').hidden = true;
          document.getElementById('thanks-view').hidden = false;
          return;
        }}
        const data = await res.json();
        document.getElementById('error').textContent =
          typeof data.detail === 'string' ? data.detail : 'Please check the form.';
      }};
    </script>
  </body>
</html>
"""
    )


WAITING_LIST_PAGE_HTML = _lead_page(
    title="Join the Waiting List",
    subtitle="Be the first to know when Animal Portrait Studio launches.",
    path="/waiting-list",
    fields="""<label>Name<input id="name" required /></label>
          <label>Email<input id="email" type="email" required /></label>
          <label>Country<input id="country" required /></label>""",
    payload="{ name: value('name'), email: value('email'), country: value('country') }",
)

EARLY_ACCESS_PAGE_HTML = _lead_page(
    title="Get Early Access",
    subtitle="Sign up and we'll send you an invite.",
    path="/early-access",
    fields="""<label>Full Name<input id="fullName" required /></label>
          <label>Email<input id="email" type="email" required /></label>""",
    payload="{ full_name: value('fullName'), email: value('email') }",
)
